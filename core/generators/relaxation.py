#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
候选字筛选条件与逐级放宽

FilterSet 描述一次取字的全部筛选条件；每个放宽步骤都是 FilterSet -> FilterSet 的纯函数，
生成器在候选数不足时按 RELAXATION_STEPS 顺序依次应用。
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from core.data.constants import ALL_ELEMENTS, FiveElement

# 放宽取样时的倍数
WIDEN_FACTOR = 4


@dataclass(frozen=True)
class FilterSet:
    """取字筛选条件"""
    target_elements: Tuple[FiveElement, ...] = ()
    avoid_elements: Tuple[FiveElement, ...] = ()
    style: Optional[str] = None
    source: Optional[str] = None
    gender: Optional[str] = None
    pair_sample_size: int = 400
    pool_limit: Optional[int] = None

    @property
    def allowed_elements(self) -> Tuple[FiveElement, ...]:
        """可用五行：目标五行（为空时取全部）去掉回避五行，回避优先"""
        base = self.target_elements or ALL_ELEMENTS
        return tuple(e for e in base if e not in self.avoid_elements)


def drop_avoid_elements(filters: FilterSet) -> FilterSet:
    """不再回避五行"""
    return replace(filters, avoid_elements=())


def drop_target_elements(filters: FilterSet) -> FilterSet:
    """不再限定喜用/偏好五行"""
    return replace(filters, target_elements=())


def widen_sampling(filters: FilterSet) -> FilterSet:
    """扩大双字组合取样上限，取消字池截断"""
    return replace(
        filters,
        pair_sample_size=filters.pair_sample_size * WIDEN_FACTOR,
        pool_limit=None,
    )


def drop_tag_filters(filters: FilterSet) -> FilterSet:
    """不再按风格、出处、性别筛字"""
    return replace(filters, style=None, source=None, gender=None)


RelaxationStep = Callable[[FilterSet], FilterSet]

RELAXATION_STEPS: Tuple[RelaxationStep, ...] = (
    drop_avoid_elements,
    drop_target_elements,
    widen_sampling,
    drop_tag_filters,
)
