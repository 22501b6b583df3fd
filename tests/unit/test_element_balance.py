#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行平衡与喜忌分析单元测试"""

import pytest

from core.analyzers.element_balance_analyzer import (
    ElementBalanceAnalyzer,
    favorable_elements,
    get_element_relation,
)
from core.calculators.bazi_calendar import compute_chart
from core.data.constants import Branch, FiveElement, Stem
from core.models.naming_models import Pillar

METAL, WOOD, WATER, FIRE, EARTH = (
    FiveElement.METAL, FiveElement.WOOD, FiveElement.WATER, FiveElement.FIRE, FiveElement.EARTH,
)


def _pillars(*texts):
    return tuple(Pillar(Stem(t[0]), Branch(t[1])) for t in texts)


class TestFiveElement:
    def test_generation_cycle(self):
        assert WOOD.generates == FIRE
        assert FIRE.generates == EARTH
        assert EARTH.generates == METAL
        assert METAL.generates == WATER
        assert WATER.generates == WOOD

    def test_restraint_cycle(self):
        assert WOOD.restrains == EARTH
        assert EARTH.restrains == WATER
        assert WATER.restrains == FIRE
        assert FIRE.restrains == METAL
        assert METAL.restrains == WOOD

    @pytest.mark.parametrize("element", list(FiveElement))
    def test_inverse_relations(self, element):
        assert element.generates.generated_by == element
        assert element.restrains.restrained_by == element

    @pytest.mark.parametrize("value,expected", [
        ("金", METAL), ("water", WATER), ("Fire", FIRE), (" 土 ", EARTH), (WOOD, WOOD),
    ])
    def test_parse(self, value, expected):
        assert FiveElement.parse(value) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            FiveElement.parse("风")


class TestRelation:
    @pytest.mark.parametrize("target,relation", [
        (WATER, "same"),
        (WOOD, "me_producing"),
        (FIRE, "me_controlling"),
        (METAL, "producing_me"),
        (EARTH, "controlling_me"),
    ])
    def test_relations_for_water(self, target, relation):
        assert get_element_relation(WATER, target) == relation


class TestAnalyzer:
    def test_count_elements(self):
        counts = ElementBalanceAnalyzer.count_elements(_pillars("庚午", "戊子", "壬戌", "甲辰"))
        assert counts == {METAL: 1, WOOD: 1, WATER: 2, FIRE: 1, EARTH: 3}

    def test_weak_day_master(self):
        pillars = _pillars("庚午", "戊子", "壬戌", "甲辰")
        assert ElementBalanceAnalyzer.is_day_master_strong(pillars) is False
        result = ElementBalanceAnalyzer.analyze(pillars)
        assert result["day_master_element"] == WATER
        assert result["favorable_elements"] == (WATER, METAL)

    def test_strong_day_master(self):
        pillars = _pillars("己卯", "丙子", "戊午", "丙辰")
        assert ElementBalanceAnalyzer.is_day_master_strong(pillars) is True
        result = ElementBalanceAnalyzer.analyze(pillars)
        assert result["favorable_elements"] == (METAL, WOOD)
        assert result["unfavorable_elements"] == (EARTH, FIRE)

    def test_favorable_and_unfavorable_disjoint(self):
        result = ElementBalanceAnalyzer.analyze(_pillars("甲子", "丙寅", "庚辰", "壬午"))
        assert not set(result["favorable_elements"]) & set(result["unfavorable_elements"])

    def test_favorable_elements_from_chart(self):
        chart = compute_chart(1990, 12, 23, 8)
        assert favorable_elements(chart) == chart.favorable_elements


class TestBaziScore:
    def test_no_match(self):
        assert ElementBalanceAnalyzer.bazi_score([FIRE, EARTH], [WATER, METAL]) == 50

    def test_single_favorable(self):
        assert ElementBalanceAnalyzer.bazi_score([WATER, FIRE], [WATER, METAL]) == 70

    def test_two_distinct_favorable_get_variety_bonus(self):
        assert ElementBalanceAnalyzer.bazi_score([WATER, METAL], [WATER, METAL]) == 100

    def test_same_favorable_twice_no_variety_bonus(self):
        assert ElementBalanceAnalyzer.bazi_score([WATER, WATER], [WATER, METAL]) == 90

    def test_unfavorable_penalty(self):
        assert ElementBalanceAnalyzer.bazi_score([EARTH, FIRE], [WATER], [EARTH, FIRE]) == 20

    @pytest.mark.parametrize("elements", [[e1, e2] for e1 in FiveElement for e2 in FiveElement])
    def test_range(self, elements):
        score = ElementBalanceAnalyzer.bazi_score(elements, [WATER, METAL], [EARTH, FIRE])
        assert 0 <= score <= 100
