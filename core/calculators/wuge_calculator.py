#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五格剖象计算

天格：单姓为姓氏笔画 + 1，复姓为姓氏笔画之和
人格：姓氏末字 + 名字首字
地格：单名为名字笔画 + 1，双名为名字笔画之和
总格：全名笔画之和
外格：总格 - 人格 + 1

各格按八十一数理取吉凶，再结合天人地三才五行给出综合分。
笔画均为康熙字典笔画。
"""

import logging
from typing import Dict, Sequence, Tuple

from core.data.constants import FiveElement
from core.data.numerology_81 import FORTUNE_CATEGORY, FORTUNE_POINTS, NUMEROLOGY_81, reduce_number
from core.exceptions import InvalidConstraint
from core.models.naming_models import GridInterpretation, WugeAnalysis, WugeGrids

logger = logging.getLogger(__name__)

# 各格权重：人格、总格为主
GRID_WEIGHTS: Dict[str, float] = {
    'tian_ge': 0.15,
    'ren_ge': 0.25,
    'di_ge': 0.20,
    'wai_ge': 0.15,
    'zong_ge': 0.25,
}

# 五格分与三才分的占比
GRID_SHARE = 0.7
SANCAI_SHARE = 0.3

# 三才配合分
SANCAI_GENERATING = 90
SANCAI_SAME = 70
SANCAI_RESTRAINING = 50
SANCAI_OTHER = 70

# 数理尾数 -> 五行：1、2 木，3、4 火，5、6 土，7、8 金，9、0 水
DIGIT_ELEMENTS: Tuple[FiveElement, ...] = (
    FiveElement.WATER,
    FiveElement.WOOD, FiveElement.WOOD,
    FiveElement.FIRE, FiveElement.FIRE,
    FiveElement.EARTH, FiveElement.EARTH,
    FiveElement.METAL, FiveElement.METAL,
    FiveElement.WATER,
)


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _check_strokes(strokes: Sequence[int], label: str) -> Tuple[int, ...]:
    if not strokes:
        raise InvalidConstraint(f"{label}笔画不能为空")
    for stroke in strokes:
        if isinstance(stroke, bool) or not isinstance(stroke, int) or stroke <= 0:
            raise InvalidConstraint(f"{label}笔画必须为正整数: {stroke!r}")
    return tuple(strokes)


def calculate_wuge(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> WugeGrids:
    """
    计算五格

    Args:
        surname_strokes: 姓氏各字笔画
        given_strokes: 名字各字笔画

    Returns:
        WugeGrids

    Raises:
        InvalidConstraint: 笔画序列为空或含非正整数
    """
    surname = _check_strokes(surname_strokes, '姓氏')
    given = _check_strokes(given_strokes, '名字')

    tian_ge = surname[0] + 1 if len(surname) == 1 else sum(surname)
    ren_ge = surname[-1] + given[0]
    di_ge = given[-1] + 1 if len(given) == 1 else sum(given)
    zong_ge = sum(surname) + sum(given)
    wai_ge = zong_ge - ren_ge + 1

    return WugeGrids(
        tian_ge=tian_ge,
        ren_ge=ren_ge,
        di_ge=di_ge,
        wai_ge=wai_ge,
        zong_ge=zong_ge,
    )


def interpret_number(value: int) -> GridInterpretation:
    """按八十一数理解释单格"""
    number = reduce_number(value)
    fortune, meaning = NUMEROLOGY_81[number]
    return GridInterpretation(
        number=number,
        fortune=fortune,
        category=FORTUNE_CATEGORY[fortune],
        meaning=meaning,
    )


def number_element(value: int) -> FiveElement:
    """数理尾数所属五行"""
    return DIGIT_ELEMENTS[value % 10]


def sancai_pair_score(first: FiveElement, second: FiveElement) -> int:
    """三才相邻两才的配合分"""
    if first.generates == second:
        return SANCAI_GENERATING
    if first == second:
        return SANCAI_SAME
    if first.restrains == second:
        return SANCAI_RESTRAINING
    return SANCAI_OTHER


def analyze_wuge(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> WugeAnalysis:
    """
    五格完整分析：五格数、各格吉凶、三才配置、综合分（0-100）
    """
    grids = calculate_wuge(surname_strokes, given_strokes)
    values = grids.as_dict()

    interpretations = {name: interpret_number(value) for name, value in values.items()}
    grid_score = sum(
        FORTUNE_POINTS[interpretations[name].fortune] * weight
        for name, weight in GRID_WEIGHTS.items()
    )

    sancai = (
        number_element(grids.tian_ge),
        number_element(grids.ren_ge),
        number_element(grids.di_ge),
    )
    sancai_score = _round_half_up(
        (sancai_pair_score(sancai[0], sancai[1]) + sancai_pair_score(sancai[1], sancai[2])) / 2
    )

    overall = _round_half_up(grid_score * GRID_SHARE + sancai_score * SANCAI_SHARE)
    overall = max(0, min(100, overall))

    return WugeAnalysis(
        grids=grids,
        interpretations=interpretations,
        sancai=sancai,
        sancai_score=sancai_score,
        overall_score=overall,
    )
