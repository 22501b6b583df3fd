#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
姓名音韵分析器

从声调起伏、声母拗口、谐音忌讳、收尾音、头韵五个方面打分（0-100），
每条命中的规则都会产出一条提醒或建议。

拼音音节可带数字调号（如 ming2），无调号时按一声处理。
复姓拼音以空格分隔（如 "ou1 yang2"）。
"""

import logging
import re
from typing import List, Sequence, Tuple, Union

from core.data.phonology import (
    AVOID_CONSONANT_CLUSTERS,
    AVOID_ENDINGS,
    AVOID_HOMOPHONES,
    AVOID_TONE_PATTERNS,
    INITIALS,
    PREFERRED_ENDINGS,
    TONE_PATTERNS,
)
from core.exceptions import InvalidConstraint
from core.models.naming_models import PhoneticReport

logger = logging.getLogger(__name__)

DEFAULT_TONE = 1
_TONE_DIGIT = re.compile(r'[1-4]')
_NON_LETTERS = re.compile(r'[^a-z]')

MONOTONOUS_PENALTY = 20
CLUSTER_PENALTY = 10
HOMOPHONE_PENALTY = 30
ENDING_ADJUSTMENT = 5
ALLITERATION_PENALTY = 15
TWO_INITIALS_BONUS = 3


def split_syllable(syllable: str) -> Tuple[str, int]:
    """
    拆分音节为（纯字母拼音，声调）

    Examples:
        >>> split_syllable('Ming2')
        ('ming', 2)
        >>> split_syllable('lv')
        ('lv', 1)
    """
    text = syllable.strip().lower().replace('ü', 'v')
    match = _TONE_DIGIT.search(text)
    tone = int(match.group()) if match else DEFAULT_TONE
    return _NON_LETTERS.sub('', text), tone


def extract_initial(syllable: str) -> str:
    """提取声母，零声母返回空串"""
    for initial in INITIALS:
        if syllable.startswith(initial):
            return initial
    return ''


def _as_syllables(value: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(value, str):
        return value.split()
    return [s for s in value if s and s.strip()]


def check_name_phonetics(surname_pinyin: Union[str, Sequence[str]],
                         given_pinyin: Union[str, Sequence[str]]) -> PhoneticReport:
    """
    音韵评分

    Args:
        surname_pinyin: 姓氏拼音，复姓空格分隔或传列表
        given_pinyin: 名字各字拼音

    Returns:
        PhoneticReport

    Raises:
        InvalidConstraint: 名字拼音为空
    """
    surname_parts = [split_syllable(s) for s in _as_syllables(surname_pinyin)]
    given_parts = [split_syllable(s) for s in _as_syllables(given_pinyin)]
    if not given_parts:
        raise InvalidConstraint("名字拼音不能为空")

    score = 100
    warnings: List[str] = []
    suggestions: List[str] = []

    given_tones = tuple(tone for _, tone in given_parts)
    full_tones = tuple(tone for _, tone in surname_parts) + given_tones
    tone_text = '-'.join(str(t) for t in given_tones)

    # 1. 声调单调
    if given_tones in AVOID_TONE_PATTERNS or (len(given_tones) >= 2 and len(set(given_tones)) == 1):
        score -= MONOTONOUS_PENALTY
        warnings.append(f"名字声调单一（{tone_text}），读来缺少起伏")
        suggestions.append("名字各字宜搭配不同声调")

    # 2. 经典声调组合
    pattern_score = TONE_PATTERNS.get(full_tones)
    if pattern_score is not None:
        score += (pattern_score - 80) // 2
        suggestions.append(f"全名声调 {'-'.join(str(t) for t in full_tones)} 抑扬顿挫，朗朗上口")

    # 3. 相邻音节声母拗口
    syllables = [text for text, _ in surname_parts] + [text for text, _ in given_parts]
    initials = [extract_initial(text) for text in syllables]
    for i in range(len(syllables) - 1):
        if initials[i] and initials[i] == initials[i + 1] and initials[i] in AVOID_CONSONANT_CLUSTERS:
            score -= CLUSTER_PENALTY
            warnings.append(
                f"「{syllables[i]}」与「{syllables[i + 1]}」声母同为 {initials[i]}，连读拗口"
            )

    # 4. 不雅谐音（只扣一次）
    joined = ''.join(text for text, _ in given_parts)
    has_homophone = False
    for sound, homophone in AVOID_HOMOPHONES.items():
        if sound in joined:
            has_homophone = True
            warnings.append(f"名字读音含「{sound}」，易谐音「{homophone}」")
    if has_homophone:
        score -= HOMOPHONE_PENALTY

    # 5. 收尾音
    last = given_parts[-1][0]
    if any(last.endswith(ending) for ending in PREFERRED_ENDINGS):
        score += ENDING_ADJUSTMENT
        suggestions.append(f"收尾音「{last}」响亮悦耳")
    elif any(last.endswith(ending) for ending in AVOID_ENDINGS):
        score -= ENDING_ADJUSTMENT
        warnings.append(f"收尾音「{last}」不够响亮")
        suggestions.append("末字宜选用开口音或鼻韵母收尾")

    # 6. 头韵
    unique_initials = set(initials)
    if len(syllables) >= 2 and len(unique_initials) == 1:
        score -= ALLITERATION_PENALTY
        warnings.append("全名声母完全相同，头韵过重")
    elif len(unique_initials) == 2:
        score += TWO_INITIALS_BONUS
        suggestions.append("声母有变化而不杂乱")

    score = max(0, min(100, score))
    return PhoneticReport(
        score=score,
        warnings=tuple(warnings),
        suggestions=tuple(suggestions),
        tones=full_tones,
    )
