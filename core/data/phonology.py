#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
音韵规则表

声调组合、声母、谐音忌讳、收尾音等固定数据，供音韵分析使用。
"""

from typing import Dict, Tuple

# 声母，双字母声母必须排在前面
INITIALS: Tuple[str, ...] = (
    'zh', 'ch', 'sh',
    'b', 'p', 'm', 'f', 'd', 't', 'n', 'l',
    'g', 'k', 'h', 'j', 'q', 'x', 'r', 'z', 'c', 's', 'w', 'y',
)

# 悦耳的声调组合（姓 + 名）及评分
TONE_PATTERNS: Dict[Tuple[int, ...], int] = {
    (1, 3, 1): 95,
    (2, 1, 4): 92,
    (1, 2, 4): 90,
    (3, 1, 2): 88,
    (4, 1, 3): 87,
    (1, 4, 2): 86,
    (2, 3, 1): 85,
}

# 单调的名字声调组合
AVOID_TONE_PATTERNS: Tuple[Tuple[int, ...], ...] = (
    (4, 4, 4),
    (3, 3, 3),
    (1, 1, 1),
    (4, 4),
)

# 相邻音节同属这些声母时拗口
AVOID_CONSONANT_CLUSTERS: Tuple[str, ...] = ('zh', 'sh', 'ch', 'z', 'c', 's', 'j', 'q', 'x')

# 不雅谐音
AVOID_HOMOPHONES: Dict[str, str] = {
    'wangba': '王八',
    'si': '死',
    'kui': '亏',
    'duan': '短',
    'bing': '病',
    'mei': '霉',
    'cao': '草',
}

PREFERRED_ENDINGS: Tuple[str, ...] = ('an', 'ing', 'en', 'yu', 'hua', 'xin', 'yi', 'yun')
AVOID_ENDINGS: Tuple[str, ...] = ('si', 'kui', 'dui', 'bi', 'mo')
