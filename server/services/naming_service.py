#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名服务层

负责组装字库、计算缓存、评分器与生成器，并把结果格式化为接口数据。
"""

import logging
import re
import threading
from datetime import date
from typing import Any, Dict, List, Optional

from core.exceptions import InvalidConstraint
from core.generators.name_generator import NameGenerator
from core.analyzers.name_scorer import NameScorer
from core.models.naming_models import GenerationRequest, NameCandidate
from server.config.app_config import AppConfig, get_config
from server.services.character_store import InMemoryCharacterStore
from server.utils.computation_cache import NamingCache

logger = logging.getLogger(__name__)

_FULL_NAME_PATTERN = re.compile(r"^[\u3400-\u4dbf\u4e00-\u9fff]{2,4}$")


class NamingService:
    """起名服务"""

    def __init__(self, store, cache: NamingCache, generator: NameGenerator):
        self.store = store
        self.cache = cache
        self.generator = generator

    @property
    def scorer(self) -> NameScorer:
        return self.generator.scorer

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> 'NamingService':
        """按应用配置创建服务：加载字库、创建缓存与生成器"""
        config = config or get_config()
        store = InMemoryCharacterStore.from_json(config.generator.data_file)
        cache = NamingCache.from_config(config.cache)
        generator = NameGenerator.from_config(store, cache, config.generator)
        logger.info("起名服务初始化完成: env=%s, 字库 %d 字", config.env, len(store))
        return cls(store, cache, generator)

    def generate(self, request: GenerationRequest) -> List[NameCandidate]:
        """
        生成候选名

        Raises:
            InvalidConstraint: 请求结构不合法
            InvalidDate: 生辰不合法
        """
        return self.generator.generate(request)

    def analyze_name(self, full_name: str, birth_date: Optional[date] = None,
                     birth_hour: Optional[int] = None) -> Dict[str, Any]:
        """
        分析一个完整姓名

        识别复姓后按名字用字计算四维评分，附带五格、音韵详情；
        提供生辰时同时返回命盘与喜忌五行。

        Raises:
            InvalidConstraint: 姓名格式错误或名字用字未收录
            InvalidDate: 生辰不合法
        """
        full_name = (full_name or '').strip()
        if not _FULL_NAME_PATTERN.match(full_name):
            raise InvalidConstraint(f"姓名必须为 2-4 个汉字: {full_name!r}")

        surname_text, given_name = self.store.split_full_name(full_name)
        if not given_name or len(given_name) > 2:
            raise InvalidConstraint(f"无法识别名字部分: {full_name!r}")

        given = []
        for char in given_name:
            character = self.store.get(char)
            if character is None:
                raise InvalidConstraint(f"字库未收录「{char}」，无法评分")
            given.append(character)

        surname = self.generator.resolve_surname(surname_text)
        chart = self.generator.chart_for(GenerationRequest(
            surname=surname_text, birth_date=birth_date, birth_hour=birth_hour,
        ))
        favorable, unfavorable = self.generator.element_profile(chart, (), ())

        score = self.scorer.score(surname, given, favorable, unfavorable, with_bazi=chart is not None)
        wuge = self.scorer.wuge(surname.strokes, [c.stroke_count for c in given])
        phonetics = self.scorer.phonetics(full_name, surname.pinyin, [c.tone_pinyin for c in given])

        return {
            'full_name': full_name,
            'surname': surname_text,
            'given_name': given_name,
            'characters': [
                {
                    'char': c.char,
                    'pinyin': c.pinyin,
                    'tone': c.tone,
                    'stroke_count': c.stroke_count,
                    'element': c.element.value,
                    'meaning': c.meaning,
                }
                for c in given
            ],
            'score': score.to_dict(),
            'wuge': wuge.to_dict(),
            'phonetics': phonetics.to_dict(),
            'bazi': chart.to_dict() if chart else None,
        }

    def cache_stats(self) -> Dict[str, Dict[str, Any]]:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()


# 全局服务实例（单例模式）
_naming_service: Optional[NamingService] = None
_service_lock = threading.Lock()


def get_naming_service() -> NamingService:
    """获取起名服务实例（全局单例，首次调用时加载字库）"""
    global _naming_service
    if _naming_service is None:
        with _service_lock:
            if _naming_service is None:
                _naming_service = NamingService.from_config()
    return _naming_service


def reset_naming_service() -> None:
    """丢弃全局服务实例，下次获取时按当前配置重建"""
    global _naming_service
    with _service_lock:
        _naming_service = None
