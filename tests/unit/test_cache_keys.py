#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""缓存键生成单元测试"""

from core.data.constants import FiveElement
from core.cache_key_generator import CacheKeyGenerator


class TestCacheKeyGenerator:
    def test_chart_key(self):
        assert CacheKeyGenerator.chart_key(1990, 12, 23, 8) == "bazi:1990-12-23-8"

    def test_chart_key_missing_hour(self):
        assert CacheKeyGenerator.chart_key(1990, 12, 23, None) == CacheKeyGenerator.chart_key(1990, 12, 23, 0)

    def test_chart_key_late_zi(self):
        assert CacheKeyGenerator.chart_key(1990, 12, 23, 23, True) == "bazi:1990-12-23-23:late_zi"
        assert CacheKeyGenerator.chart_key(1990, 12, 23, 22, True) == "bazi:1990-12-23-22"

    def test_wuge_key(self):
        assert CacheKeyGenerator.wuge_key([7], [11, 12]) == "wuge:7:11-12"
        assert CacheKeyGenerator.wuge_key([15, 17], [8]) == "wuge:15-17:8"

    def test_phonetics_key(self):
        assert CacheKeyGenerator.phonetics_key("李明华") == "phonetics:李明华"

    def test_name_score_key_plain(self):
        assert CacheKeyGenerator.name_score_key("李", "明华", with_bazi=False) == "name_score:李:明华"

    def test_name_score_key_with_bazi(self):
        key = CacheKeyGenerator.name_score_key(
            "李", "明华", (FiveElement.WATER, FiveElement.METAL), (FiveElement.EARTH,)
        )
        assert key == "name_score:李:明华:with_bazi:水金/土"

    def test_name_score_key_preferred(self):
        key = CacheKeyGenerator.name_score_key("李", "明华", (FiveElement.WOOD,), with_bazi=False)
        assert key == "name_score:李:明华:prefer:木/"
