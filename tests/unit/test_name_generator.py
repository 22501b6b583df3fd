#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""候选名生成与排序单元测试"""

from collections import Counter
from datetime import date
from itertools import islice

import pytest

from core.analyzers.name_scorer import NameScorer
from core.data.constants import ALL_ELEMENTS, FiveElement
from core.exceptions import InvalidConstraint, InvalidDate
from core.generators.name_generator import NameGenerator, rank_candidates, ranked_pairs, unique_elements
from core.generators.relaxation import FilterSet
from core.models.naming_models import GenerationRequest, NameCandidate, Rating, ScoreBreakdown


def _candidate(full_name, overall, pinyin):
    score = ScoreBreakdown(70, 70, 70, 70, overall, Rating.AVERAGE)
    return NameCandidate(
        surname=full_name[0], given_name=full_name[1:], full_name=full_name,
        pinyin=pinyin, characters=(), score=score,
    )


def _assert_sorted(candidates):
    overalls = [c.score.overall for c in candidates]
    assert overalls == sorted(overalls, reverse=True)


class TestRankCandidates:
    def test_dedupe_keeps_first(self):
        first = _candidate("李明", 80, "li ming")
        ranked = rank_candidates([first, _candidate("李明", 90, "li ming")], 10)
        assert ranked == [first]

    def test_order_and_ties(self):
        items = [
            _candidate("李华", 80, "li hua"),
            _candidate("李安", 80, "li an"),
            _candidate("李明", 90, "li ming"),
            _candidate("李安", 70, "li an"),
        ]
        assert [c.full_name for c in rank_candidates(items, 10)] == ["李明", "李安", "李华"]

    def test_truncate(self):
        items = [_candidate(f"李{c}", 80, f"li {i}") for i, c in enumerate("明华安")]
        assert len(rank_candidates(items, 2)) == 2

    def test_unique_elements(self):
        assert unique_elements(["水", FiveElement.WATER, "metal"]) == (FiveElement.WATER, FiveElement.METAL)


class TestRankedPairs:
    def test_order_by_rank_sum(self):
        assert list(islice(ranked_pairs("abcd"), 4)) == [("a", "b"), ("b", "a"), ("a", "c"), ("c", "a")]

    def test_all_pairs_without_self_pairs(self):
        pairs = list(ranked_pairs("abcde"))
        assert len(pairs) == len(set(pairs)) == 20
        assert all(first != second for first, second in pairs)

    @pytest.mark.parametrize("pool", ["", "a"])
    def test_too_small_pool(self, pool):
        assert list(ranked_pairs(pool)) == []

    def test_sample_spreads_first_characters(self):
        pool = [f"c{i}" for i in range(60)]
        filters = FilterSet(pair_sample_size=400)
        pairs = list(NameGenerator._combinations(pool, filters, 2))
        assert len(pairs) == 400
        firsts = Counter(first for first, _ in pairs)
        assert len(firsts) >= 20
        assert max(firsts.values()) < 30


class TestGenerate:
    def test_basic(self, name_generator):
        results = name_generator.generate(GenerationRequest(surname="李", max_results=10))
        assert len(results) == 10
        _assert_sorted(results)
        assert len({c.full_name for c in results}) == 10
        for candidate in results:
            assert candidate.full_name == "李" + candidate.given_name
            assert len(candidate.given_name) == 2
            assert candidate.given_name[0] != candidate.given_name[1]
            assert candidate.pinyin.startswith("li ")
            assert candidate.explanation

    def test_first_characters_vary(self, name_generator):
        results = name_generator.generate(GenerationRequest(surname="李", max_results=50))
        assert len(results) == 50
        assert len({c.given_name[0] for c in results}) > 5

    @pytest.mark.parametrize("count", [1, 2])
    def test_character_count(self, name_generator, count):
        results = name_generator.generate(GenerationRequest(surname="王", character_count=count, max_results=5))
        assert results
        assert all(len(c.given_name) == count for c in results)
        assert all(len(c.characters) == count for c in results)

    def test_scores_in_range(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="张", birth_date=date(1990, 12, 23), birth_hour=8, max_results=20,
        ))
        for candidate in results:
            for value in candidate.score.to_dict().values():
                if isinstance(value, int):
                    assert 0 <= value <= 100

    def test_deterministic(self, character_store, naming_cache):
        request = GenerationRequest(surname="李", birth_date=date(1990, 12, 23), birth_hour=8, max_results=10)
        first = NameGenerator(character_store, naming_cache).generate(request)
        second = NameGenerator(character_store, naming_cache.in_memory()).generate(request)
        assert [c.full_name for c in first] == [c.full_name for c in second]
        assert [c.score for c in first] == [c.score for c in second]

    def test_birth_date_changes_ranking(self, name_generator):
        weak_water = name_generator.generate(GenerationRequest(
            surname="李", birth_date=date(1990, 12, 23), birth_hour=8, max_results=10,
        ))
        strong_earth = name_generator.generate(GenerationRequest(
            surname="李", birth_date=date(2000, 1, 1), birth_hour=8, max_results=10,
        ))
        assert [c.full_name for c in weak_water] != [c.full_name for c in strong_earth]

    def test_preferred_and_avoid(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="李",
            preferred_elements=(FiveElement.WATER,),
            avoid_elements=(FiveElement.FIRE,),
            max_results=5,
        ))
        assert len(results) == 5
        assert all(c.element == FiveElement.WATER for r in results for c in r.characters)

    def test_avoid_all_elements_still_returns(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="李", avoid_elements=ALL_ELEMENTS, max_results=5,
        ))
        assert len(results) == 5
        _assert_sorted(results)

    def test_avoid_all_with_chart(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="李", birth_date=date(1990, 12, 23), birth_hour=8,
            avoid_elements=ALL_ELEMENTS, max_results=20,
        ))
        assert len(results) == 20

    def test_narrow_filters_relaxed(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="李", gender="female", source="idioms", style="poetic",
            character_count=1, max_results=20,
        ))
        assert len(results) == 20

    def test_no_relaxation_steps(self, character_store, naming_cache):
        generator = NameGenerator(character_store, naming_cache, relaxation_steps=())
        results = generator.generate(GenerationRequest(
            surname="李", avoid_elements=ALL_ELEMENTS, max_results=5,
        ))
        assert results == []

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (500, 50), (None, 20)])
    def test_max_results_clamped(self, name_generator, requested, expected):
        assert name_generator.clamp_max_results(requested) == expected

    def test_max_results_limit_applied(self, name_generator):
        results = name_generator.generate(GenerationRequest(surname="李", max_results=500))
        assert len(results) == 50

    def test_chart_cached(self, name_generator, naming_cache):
        request = GenerationRequest(surname="李", birth_date=date(1990, 12, 23), birth_hour=8, max_results=3)
        name_generator.generate(request)
        name_generator.generate(request)
        assert "bazi:1990-12-23-8" in naming_cache.chart
        assert naming_cache.chart.stats()["hits"] >= 1

    def test_compound_surname(self, name_generator):
        results = name_generator.generate(GenerationRequest(surname="欧阳", max_results=5))
        assert results
        assert all(c.full_name.startswith("欧阳") for c in results)
        assert all(c.pinyin.startswith("ou yang ") for c in results)

    def test_unknown_surname(self, name_generator):
        results = name_generator.generate(GenerationRequest(surname="龘", max_results=3))
        assert len(results) == 3

    def test_source_attribution(self, name_generator):
        results = name_generator.generate(GenerationRequest(
            surname="李", source="poetry", character_count=1, max_results=10,
        ))
        attributed = [c for c in results if c.source is not None]
        assert attributed
        assert all(c.source.kind == "poetry" for c in attributed)

    def test_scoring_error_skips_candidate(self, character_store, naming_cache):
        class FailingScorer(NameScorer):
            def score(self, surname, given, *args, **kwargs):
                if any(c.char == "明" for c in given):
                    raise RuntimeError("boom")
                return super().score(surname, given, *args, **kwargs)

        generator = NameGenerator(character_store, naming_cache, FailingScorer(naming_cache))
        results = generator.generate(GenerationRequest(surname="李", character_count=1, max_results=50))
        assert results
        assert all("明" not in c.given_name for c in results)


class TestValidation:
    @pytest.mark.parametrize("count", [0, 3, True])
    def test_invalid_character_count(self, name_generator, count):
        with pytest.raises(InvalidConstraint):
            name_generator.generate(GenerationRequest(surname="李", character_count=count))

    @pytest.mark.parametrize("surname", ["", "Li", "司马相", "李1"])
    def test_invalid_surname(self, name_generator, surname):
        with pytest.raises(InvalidConstraint):
            name_generator.generate(GenerationRequest(surname=surname))

    def test_invalid_hour(self, name_generator):
        with pytest.raises(InvalidDate):
            name_generator.generate(GenerationRequest(surname="李", birth_date=date(2000, 1, 1), birth_hour=24))


class TestElementProfile:
    def test_without_chart(self):
        favorable, unfavorable = NameGenerator.element_profile(
            None, (FiveElement.WATER, FiveElement.FIRE), (FiveElement.FIRE,)
        )
        assert favorable == (FiveElement.WATER,)
        assert unfavorable == (FiveElement.FIRE,)

    def test_with_chart(self, name_generator):
        chart = name_generator.chart_for(GenerationRequest(surname="李", birth_date=date(1990, 12, 23), birth_hour=8))
        favorable, unfavorable = NameGenerator.element_profile(chart, (FiveElement.WOOD,), (FiveElement.METAL,))
        assert favorable == (FiveElement.WATER, FiveElement.WOOD)
        assert unfavorable == (FiveElement.EARTH, FiveElement.FIRE, FiveElement.METAL)
