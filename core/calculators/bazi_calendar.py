#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公历 -> 八字四柱

年柱：(年 - 4) 取模，以立春为界
月柱：节令定月支，五虎遁定月干
日柱：儒略日数 + 校准偏移取六十甲子
时柱：两小时一支，五鼠遁定时干

节令时刻由 lunar_python 提供，其余均为固定表推算。
"""

import logging
from datetime import date, timedelta
from typing import Optional

from lunar_python import Solar

from core.analyzers.element_balance_analyzer import ElementBalanceAnalyzer
from core.data.constants import (
    Branch,
    FIVE_RATS_START,
    FIVE_TIGERS_START,
    JIE_KEY_ALIASES,
    JIE_MONTH_BRANCH,
    Stem,
)
from core.exceptions import InvalidDate
from core.models.naming_models import FourPillarsChart, Pillar

logger = logging.getLogger(__name__)

# 未提供时辰时按子时（0 点）排盘
DEFAULT_BIRTH_HOUR = 0

# date.toordinal() 与儒略日数之差
JDN_ORDINAL_OFFSET = 1721425

# 日柱校准：1990-12-23 壬戌，2000-01-01 戊午
DAY_CYCLE_OFFSET = 49


def julian_day_number(d: date) -> int:
    """公历日期的儒略日数（正午起算的整数日）"""
    return d.toordinal() + JDN_ORDINAL_OFFSET


def validate_birth(year, month, day, hour=None) -> date:
    """
    校验出生日期与时辰

    Raises:
        InvalidDate: 非真实公历日期，或时辰不在 0-23
    """
    try:
        birth_date = date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDate(f"无效的公历日期: {year}-{month}-{day}") from e

    if hour is not None:
        if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
            raise InvalidDate(f"无效的时辰: {hour!r}，应为 0-23 的整数")
    return birth_date


def solar_term_month_branch(year: int, month: int, day: int, hour: int) -> Branch:
    """按出生时刻之前最近的“节”确定月支"""
    lunar = Solar.fromYmdHms(year, month, day, hour, 0, 0).getLunar()
    jie_name = lunar.getPrevJie().getName()
    jie_name = JIE_KEY_ALIASES.get(jie_name, jie_name)
    return JIE_MONTH_BRANCH[jie_name]


def year_pillar(year: int) -> Pillar:
    """年柱（year 为已按立春修正的干支年）"""
    return Pillar(Stem.at(year - 4), Branch.at(year - 4))


def month_pillar(year_stem: Stem, month_branch: Branch) -> Pillar:
    """五虎遁：从寅月起干，每过一支天干顺进一位"""
    start = FIVE_TIGERS_START[year_stem.index % 5]
    steps = (month_branch.index - Branch.YIN.index) % 12
    return Pillar(Stem.at(start.index + steps), month_branch)


def day_pillar(d: date) -> Pillar:
    return Pillar.from_cycle_index(julian_day_number(d) + DAY_CYCLE_OFFSET)


def hour_branch(hour: int) -> Branch:
    """23:00-00:59 为子时，此后每两小时一支"""
    return Branch.at((hour + 1) // 2)


def hour_pillar(day_stem: Stem, hour: int) -> Pillar:
    """五鼠遁：从子时起干"""
    branch = hour_branch(hour)
    start = FIVE_RATS_START[day_stem.index % 5]
    return Pillar(Stem.at(start.index + branch.index), branch)


def compute_chart(year: int, month: int, day: int, hour: Optional[int] = None,
                  *, late_zi_next_day: bool = False) -> FourPillarsChart:
    """
    计算八字四柱并分析喜忌五行

    Args:
        year: 公历年
        month: 公历月 1-12
        day: 公历日
        hour: 出生小时 0-23，缺省按 0 点
        late_zi_next_day: 晚子时（23 点）是否按次日日干起时干。
            日柱始终不因 23 点换日。

    Returns:
        FourPillarsChart

    Raises:
        InvalidDate: 日期或时辰不合法
    """
    birth_date = validate_birth(year, month, day, hour)
    if hour is None:
        hour = DEFAULT_BIRTH_HOUR

    month_branch = solar_term_month_branch(year, month, day, hour)

    # 立春前的子月、丑月仍属上一干支年
    ganzhi_year = year
    if month <= 2 and month_branch in (Branch.ZI, Branch.CHOU):
        ganzhi_year = year - 1

    y_pillar = year_pillar(ganzhi_year)
    m_pillar = month_pillar(y_pillar.stem, month_branch)
    d_pillar = day_pillar(birth_date)

    rats_stem = d_pillar.stem
    if late_zi_next_day and hour == 23:
        rats_stem = day_pillar(birth_date + timedelta(days=1)).stem
    h_pillar = hour_pillar(rats_stem, hour)

    balance = ElementBalanceAnalyzer.analyze((y_pillar, m_pillar, d_pillar, h_pillar))
    logger.debug(
        "排盘 %s-%s-%s %s时: %s %s %s %s",
        year, month, day, hour, y_pillar, m_pillar, d_pillar, h_pillar,
    )

    return FourPillarsChart(
        year=y_pillar,
        month=m_pillar,
        day=d_pillar,
        hour=h_pillar,
        favorable_elements=balance['favorable_elements'],
        unfavorable_elements=balance['unfavorable_elements'],
        element_counts=balance['element_counts'],
        day_master_strong=balance['day_master_strong'],
    )


def compute_chart_for_date(birth_date: date, hour: Optional[int] = None,
                           *, late_zi_next_day: bool = False) -> FourPillarsChart:
    """compute_chart 的 date 入参版本"""
    return compute_chart(birth_date.year, birth_date.month, birth_date.day, hour,
                         late_zi_next_day=late_zi_next_day)
