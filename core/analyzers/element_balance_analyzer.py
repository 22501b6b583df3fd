#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行平衡与喜忌分析器

功能：
- 统计四柱八个干支的五行个数
- 以日主为中心判断身强身弱
- 推导喜用五行与忌讳五行
- 计算名字用字与喜忌五行的契合分

身强身弱采用简单多数法：其余七个干支中，
同我、生我者为扶，克我、我生、我克者为抑，扶多于抑为身强。
"""

import logging
from typing import Dict, Iterable, List, Literal, Sequence, Tuple

from core.data.constants import ALL_ELEMENTS, FiveElement

logger = logging.getLogger(__name__)

# 五行关系类型
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me']


def get_element_relation(day_element: FiveElement, target_element: FiveElement) -> RelationType:
    """
    判断五行生克关系

    Args:
        day_element: 日主五行
        target_element: 目标五行

    Returns:
        RelationType: 关系类型
        - 'same': 同元素
        - 'me_producing': 我生
        - 'me_controlling': 我克
        - 'producing_me': 生我
        - 'controlling_me': 克我
    """
    if day_element == target_element:
        return 'same'
    if target_element == day_element.generates:
        return 'me_producing'
    if target_element == day_element.restrains:
        return 'me_controlling'
    if target_element == day_element.generated_by:
        return 'producing_me'
    return 'controlling_me'


def _unique(elements: Iterable[FiveElement]) -> Tuple[FiveElement, ...]:
    """保序去重"""
    seen: List[FiveElement] = []
    for element in elements:
        if element not in seen:
            seen.append(element)
    return tuple(seen)


class ElementBalanceAnalyzer:
    """五行平衡与喜忌分析器"""

    SUPPORTING_RELATIONS = ('same', 'producing_me')

    # 名字五行评分
    BASE_SCORE = 50
    FAVORABLE_BONUS = 20
    UNFAVORABLE_PENALTY = 15
    VARIETY_BONUS = 10
    MIN_UNIQUE_FAVORABLE_FOR_BONUS = 2

    @staticmethod
    def count_elements(pillars: Sequence) -> Dict[FiveElement, int]:
        """统计四柱干支五行个数（共 8 个）"""
        counts = {element: 0 for element in ALL_ELEMENTS}
        for pillar in pillars:
            counts[pillar.stem.element] += 1
            counts[pillar.branch.element] += 1
        return counts

    @staticmethod
    def is_day_master_strong(pillars: Sequence) -> bool:
        """
        判断日主强弱

        Args:
            pillars: (年柱, 月柱, 日柱, 时柱)

        Returns:
            True 为身强
        """
        day_pillar = pillars[2]
        day_element = day_pillar.stem.element

        others: List[FiveElement] = []
        for i, pillar in enumerate(pillars):
            if i != 2:
                others.append(pillar.stem.element)
            others.append(pillar.branch.element)

        support = sum(
            1 for element in others
            if get_element_relation(day_element, element) in ElementBalanceAnalyzer.SUPPORTING_RELATIONS
        )
        return support > len(others) - support

    @staticmethod
    def analyze(pillars: Sequence) -> Dict:
        """
        分析五行平衡与喜忌

        Returns:
            {
                "element_counts": {FiveElement: int},
                "day_master_element": FiveElement,
                "day_master_strong": bool,
                "favorable_elements": (FiveElement, ...),
                "unfavorable_elements": (FiveElement, ...),
            }
        """
        day_element = pillars[2].stem.element
        strong = ElementBalanceAnalyzer.is_day_master_strong(pillars)

        if strong:
            # 身强：喜泄（我生）、喜克（克我）
            favorable = _unique((day_element.generates, day_element.restrained_by))
            unfavorable = _unique((day_element, day_element.generated_by))
        else:
            # 身弱：喜扶（同我）、喜生（生我）
            favorable = _unique((day_element, day_element.generated_by))
            unfavorable = _unique((day_element.restrained_by, day_element.restrains))

        return {
            'element_counts': ElementBalanceAnalyzer.count_elements(pillars),
            'day_master_element': day_element,
            'day_master_strong': strong,
            'favorable_elements': favorable,
            'unfavorable_elements': unfavorable,
        }

    @staticmethod
    def bazi_score(elements: Sequence[FiveElement],
                   favorable: Sequence[FiveElement],
                   unfavorable: Sequence[FiveElement] = ()) -> int:
        """
        名字用字五行与喜忌的契合分（0-100）

        Args:
            elements: 名字各字五行
            favorable: 喜用五行
            unfavorable: 忌讳五行
        """
        score = ElementBalanceAnalyzer.BASE_SCORE
        for element in elements:
            if element in favorable:
                score += ElementBalanceAnalyzer.FAVORABLE_BONUS
            if element in unfavorable:
                score -= ElementBalanceAnalyzer.UNFAVORABLE_PENALTY

        unique_favorable = {e for e in elements if e in favorable}
        if len(unique_favorable) >= ElementBalanceAnalyzer.MIN_UNIQUE_FAVORABLE_FOR_BONUS:
            score += ElementBalanceAnalyzer.VARIETY_BONUS

        return max(0, min(100, score))


def favorable_elements(chart) -> Tuple[FiveElement, ...]:
    """取八字喜用五行（已保序去重，非空）"""
    if chart.favorable_elements:
        return chart.favorable_elements
    return ElementBalanceAnalyzer.analyze(chart.pillars)['favorable_elements']
