#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
名字综合评分

四个维度：八字五行契合、五格数理、音韵、字义，按 ScoreWeights 加权得到总分。
默认权重 八字 0.30、五格 0.25、音韵 0.20、字义 0.25，可通过构造参数调整。
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from core.analyzers.element_balance_analyzer import ElementBalanceAnalyzer
from core.analyzers.phonetic_analyzer import check_name_phonetics
from core.cache_key_generator import CacheKeyGenerator
from core.calculators.wuge_calculator import analyze_wuge
from core.data.constants import FiveElement
from core.models.naming_models import (
    Character,
    PhoneticReport,
    Rating,
    ScoreBreakdown,
    Surname,
    WugeAnalysis,
)

logger = logging.getLogger(__name__)

# 未提供生辰、也无偏好五行时的八字分
DEFAULT_BAZI_SCORE = 70

RATING_THRESHOLDS = (
    (90, Rating.EXCELLENT),
    (80, Rating.GOOD),
    (70, Rating.AVERAGE),
    (60, Rating.FAIR),
)

# 字义评分
MEANING_BASE_SCORE = 60
POSITIVE_MEANING_BONUS = 20
NEGATIVE_MEANING_PENALTY = 30
TOO_COMMON_PENALTY = 5
GOOD_FREQUENCY_BONUS = 15
ACCEPTABLE_FREQUENCY_BONUS = 10
TOO_RARE_PENALTY = 10
HSK_EASY_BONUS = 10
HSK_HARD_PENALTY = 5
CULTURAL_SOURCE_BONUS = 5

# 字频排名区间（数值越小越常用）
TOO_COMMON_MAX = 100
GOOD_FREQUENCY_MAX = 1000
ACCEPTABLE_FREQUENCY_MAX = 3000
TOO_RARE_MIN = 5000

HSK_EASY_MAX = 4
HSK_HARD_MIN = 5

POSITIVE_KEYWORDS = (
    '吉', '祥', '福', '贵', '富', '康', '健', '美', '丽', '慧', '智', '文', '武', '德',
    '仁', '义', '礼', '信', '忠', '孝', '勇', '才', '华', '英', '俊', '秀', '雅', '清',
    '明', '亮', '辉', '春', '夏', '秋', '冬', '花', '草', '树', '林', '山', '水', '云',
    '天', '月', '星', '日', '光', '彩', '宝', '玉', '金',
)

NEGATIVE_KEYWORDS = (
    '死', '亡', '病', '灾', '祸', '凶', '恶', '鬼', '魔', '妖', '贫', '穷', '衰', '败',
    '丑', '臭', '烂', '坏', '差',
)


@dataclass(frozen=True)
class ScoreWeights:
    """综合分权重"""
    bazi: float = 0.30
    wuge: float = 0.25
    phonetic: float = 0.20
    meaning: float = 0.25

    def __post_init__(self):
        values = (self.bazi, self.wuge, self.phonetic, self.meaning)
        if any(v < 0 for v in values) or sum(values) <= 0:
            raise ValueError(f"评分权重必须非负且不全为 0: {values}")

    @property
    def total(self) -> float:
        return self.bazi + self.wuge + self.phonetic + self.meaning


DEFAULT_WEIGHTS = ScoreWeights()


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def rating_for(overall: int) -> Rating:
    """按总分取评级"""
    for threshold, rating in RATING_THRESHOLDS:
        if overall >= threshold:
            return rating
    return Rating.POOR


def character_meaning_score(character: Character) -> int:
    """单字字义分"""
    score = MEANING_BASE_SCORE

    if any(k in character.meaning for k in POSITIVE_KEYWORDS):
        score += POSITIVE_MEANING_BONUS
    if any(k in character.meaning for k in NEGATIVE_KEYWORDS):
        score -= NEGATIVE_MEANING_PENALTY

    frequency = character.frequency
    if 0 < frequency < TOO_COMMON_MAX:
        score -= TOO_COMMON_PENALTY
    elif TOO_COMMON_MAX <= frequency < GOOD_FREQUENCY_MAX:
        score += GOOD_FREQUENCY_BONUS
    elif GOOD_FREQUENCY_MAX <= frequency < ACCEPTABLE_FREQUENCY_MAX:
        score += ACCEPTABLE_FREQUENCY_BONUS
    elif frequency > TOO_RARE_MIN:
        score -= TOO_RARE_PENALTY

    if character.hsk_level:
        if character.hsk_level <= HSK_EASY_MAX:
            score += HSK_EASY_BONUS
        elif character.hsk_level > HSK_HARD_MIN:
            score -= HSK_HARD_PENALTY

    if character.sources:
        score += CULTURAL_SOURCE_BONUS

    return max(0, min(100, score))


def meaning_score(characters: Sequence[Character]) -> int:
    """名字字义分：各字平均"""
    if not characters:
        return MEANING_BASE_SCORE
    total = sum(character_meaning_score(c) for c in characters)
    return _round_half_up(total / len(characters))


class NameScorer:
    """名字综合评分器，五格、音韵、整体评分均走注入的缓存"""

    def __init__(self, cache, weights: ScoreWeights = DEFAULT_WEIGHTS):
        """
        Args:
            cache: NamingCache
            weights: 综合分权重
        """
        self.cache = cache
        self.weights = weights

    def wuge(self, surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> WugeAnalysis:
        key = CacheKeyGenerator.wuge_key(surname_strokes, given_strokes)
        return self.cache.wuge.get_or_compute(key, lambda: analyze_wuge(surname_strokes, given_strokes))

    def phonetics(self, full_name: str, surname_pinyin: Sequence[str],
                  given_pinyin: Sequence[str]) -> PhoneticReport:
        key = CacheKeyGenerator.phonetics_key(full_name)
        return self.cache.phonetics.get_or_compute(
            key, lambda: check_name_phonetics(list(surname_pinyin), list(given_pinyin))
        )

    def bazi_score(self, given: Sequence[Character], favorable: Sequence[FiveElement],
                   unfavorable: Sequence[FiveElement]) -> int:
        if not favorable and not unfavorable:
            return DEFAULT_BAZI_SCORE
        return ElementBalanceAnalyzer.bazi_score([c.element for c in given], favorable, unfavorable)

    def score(self, surname: Surname, given: Sequence[Character],
              favorable: Sequence[FiveElement] = (),
              unfavorable: Sequence[FiveElement] = (),
              with_bazi: bool = False) -> ScoreBreakdown:
        """
        计算名字四维评分

        Args:
            surname: 姓氏
            given: 名字用字
            favorable: 喜用五行（或无八字时的偏好五行）
            unfavorable: 忌讳五行
            with_bazi: 喜忌是否来自八字

        Returns:
            ScoreBreakdown
        """
        given_name = ''.join(c.char for c in given)
        key = CacheKeyGenerator.name_score_key(
            surname.text, given_name, favorable, unfavorable, with_bazi=with_bazi
        )
        return self.cache.name_score.get_or_compute(
            key, lambda: self._compute(surname, given, favorable, unfavorable)
        )

    def _compute(self, surname: Surname, given: Sequence[Character],
                 favorable: Sequence[FiveElement],
                 unfavorable: Sequence[FiveElement]) -> ScoreBreakdown:
        given_name = ''.join(c.char for c in given)
        wuge = self.wuge(surname.strokes, [c.stroke_count for c in given])
        phonetics = self.phonetics(
            surname.text + given_name, surname.pinyin, [c.tone_pinyin for c in given]
        )

        bazi = self.bazi_score(given, favorable, unfavorable)
        meaning = meaning_score(given)

        w = self.weights
        weighted = (
            bazi * w.bazi
            + wuge.overall_score * w.wuge
            + phonetics.score * w.phonetic
            + meaning * w.meaning
        ) / w.total
        overall = max(0, min(100, _round_half_up(weighted)))

        return ScoreBreakdown(
            bazi_score=bazi,
            wuge_score=wuge.overall_score,
            phonetic_score=phonetics.score,
            meaning_score=meaning,
            overall=overall,
            rating=rating_for(overall),
        )
