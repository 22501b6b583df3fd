#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
候选名生成与排序

流程：
1. 有生辰时排盘（走缓存），喜用五行与偏好五行合并，去掉回避五行
2. 从字库按五行、风格、出处、性别取字
3. 单名取单字，双名按两字排名之和由小到大取有序字对（不含同字重复），并限制取样数量
4. 逐个评分，单个候选评分异常只记日志并跳过
5. 按全名去重，按总分降序、拼音升序、生成顺序排序并截断
6. 结果不足时按 RELAXATION_STEPS 逐级放宽条件，合并后重新排序
"""

import logging
import re
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from core.analyzers.name_scorer import NameScorer, character_meaning_score
from core.analyzers.phonetic_analyzer import split_syllable
from core.cache_key_generator import CacheKeyGenerator
from core.calculators.bazi_calendar import compute_chart
from core.data.constants import FiveElement
from core.exceptions import InvalidConstraint
from core.generators.relaxation import RELAXATION_STEPS, FilterSet, RelaxationStep
from core.models.naming_models import (
    Character,
    FourPillarsChart,
    GenerationRequest,
    NameCandidate,
    NameSource,
    ScoreBreakdown,
    Surname,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 20
MAX_RESULTS_LIMIT = 50
DEFAULT_PAIR_SAMPLE_SIZE = 400

# 双名时字池截断为 max(结果数 x 倍数, 下限)
POOL_MULTIPLIER = 5
MIN_POOL_SIZE = 30

# 姓氏未收录时的笔画兜底
UNKNOWN_SURNAME_STROKES = 1

VALID_CHARACTER_COUNTS = (1, 2)
_HAN_PATTERN = re.compile(r"^[\u3400-\u4dbf\u4e00-\u9fff]{1,2}$")


def unique_elements(elements: Iterable[FiveElement]) -> Tuple[FiveElement, ...]:
    """保序去重"""
    result: List[FiveElement] = []
    for element in elements:
        element = FiveElement.parse(element)
        if element not in result:
            result.append(element)
    return tuple(result)


def rank_candidates(candidates: Sequence[NameCandidate], limit: int) -> List[NameCandidate]:
    """按全名去重（保留先出现者），按总分降序、拼音升序、生成顺序排序，截断到 limit"""
    seen: Dict[str, int] = {}
    unique: List[NameCandidate] = []
    for candidate in candidates:
        if candidate.full_name in seen:
            continue
        seen[candidate.full_name] = len(unique)
        unique.append(candidate)

    ordered = sorted(
        enumerate(unique),
        key=lambda item: (-item[1].score.overall, item[1].pinyin, item[0]),
    )
    return [candidate for _, candidate in ordered[:limit]]


def ranked_pairs(pool: Sequence[Character]) -> Iterator[Tuple[Character, Character]]:
    """
    按两字排名之和由小到大枚举有序字对（不含同字）

    排名和相同时首字排名靠前者优先，截断后每个靠前的字都能作首字。
    """
    size = len(pool)
    for total in range(1, 2 * size - 2):
        for i in range(max(0, total - size + 1), min(size - 1, total) + 1):
            j = total - i
            if i != j:
                yield pool[i], pool[j]


class NameGenerator:
    """候选名生成器"""

    def __init__(self, store, cache, scorer: Optional[NameScorer] = None, *,
                 default_max_results: int = DEFAULT_MAX_RESULTS,
                 max_results_limit: int = MAX_RESULTS_LIMIT,
                 pair_sample_size: int = DEFAULT_PAIR_SAMPLE_SIZE,
                 late_zi_next_day: bool = False,
                 relaxation_steps: Sequence[RelaxationStep] = RELAXATION_STEPS):
        """
        Args:
            store: CharacterStore 字库
            cache: NamingCache 计算缓存
            scorer: 评分器，默认使用同一缓存与默认权重
            default_max_results: 未指定结果数时的默认值
            max_results_limit: 结果数上限
            pair_sample_size: 双名组合取样上限
            late_zi_next_day: 晚子时是否按次日起时干
            relaxation_steps: 放宽步骤，按顺序应用
        """
        self.store = store
        self.cache = cache
        self.scorer = scorer or NameScorer(cache)
        self.default_max_results = default_max_results
        self.max_results_limit = max_results_limit
        self.pair_sample_size = pair_sample_size
        self.late_zi_next_day = late_zi_next_day
        self.relaxation_steps = tuple(relaxation_steps)

    @classmethod
    def from_config(cls, store, cache, generator_config, scorer: Optional[NameScorer] = None) -> 'NameGenerator':
        """按 GeneratorConfig 创建"""
        return cls(
            store,
            cache,
            scorer,
            default_max_results=generator_config.default_max_results,
            max_results_limit=generator_config.max_results_limit,
            pair_sample_size=generator_config.pair_sample_size,
            late_zi_next_day=generator_config.late_zi_next_day,
        )

    # ==================== 校验与准备 ====================

    def clamp_max_results(self, max_results: Optional[int]) -> int:
        if max_results is None:
            max_results = self.default_max_results
        return max(1, min(self.max_results_limit, int(max_results)))

    @staticmethod
    def validate(request: GenerationRequest) -> None:
        """
        校验请求结构

        Raises:
            InvalidConstraint: 姓氏不是 1-2 个汉字，或字数不是 1、2
        """
        count = request.character_count
        if isinstance(count, bool) or count not in VALID_CHARACTER_COUNTS:
            raise InvalidConstraint(f"名字字数必须为 1 或 2，当前为 {count!r}")
        if not isinstance(request.surname, str) or not _HAN_PATTERN.match(request.surname):
            raise InvalidConstraint(f"姓氏必须为 1-2 个汉字: {request.surname!r}")

    def chart_for(self, request: GenerationRequest) -> Optional[FourPillarsChart]:
        """有生辰时排盘（走缓存）"""
        if request.birth_date is None:
            return None
        d, hour = request.birth_date, request.birth_hour
        key = CacheKeyGenerator.chart_key(d.year, d.month, d.day, hour, self.late_zi_next_day)
        return self.cache.chart.get_or_compute(
            key,
            lambda: compute_chart(d.year, d.month, d.day, hour, late_zi_next_day=self.late_zi_next_day),
        )

    def resolve_surname(self, text: str) -> Surname:
        surname = self.store.get_surname(text)
        if surname is None:
            logger.warning("姓氏 %s 未收录，笔画按 %d 处理", text, UNKNOWN_SURNAME_STROKES)
            surname = Surname(text=text, pinyin=(), strokes=(UNKNOWN_SURNAME_STROKES,) * len(text))
        return surname

    @staticmethod
    def element_profile(chart: Optional[FourPillarsChart], preferred: Sequence[FiveElement],
                        avoid: Sequence[FiveElement]) -> Tuple[Tuple[FiveElement, ...], Tuple[FiveElement, ...]]:
        """
        评分用的喜忌五行

        喜：八字喜用 + 偏好，去掉回避；忌：八字忌讳 + 回避，去掉喜用
        """
        chart_favorable = chart.favorable_elements if chart else ()
        chart_unfavorable = chart.unfavorable_elements if chart else ()
        favorable = tuple(e for e in unique_elements((*chart_favorable, *preferred)) if e not in avoid)
        unfavorable = tuple(e for e in unique_elements((*chart_unfavorable, *avoid)) if e not in favorable)
        return favorable, unfavorable

    def initial_filters(self, request: GenerationRequest, chart: Optional[FourPillarsChart],
                        max_results: int) -> FilterSet:
        chart_favorable = chart.favorable_elements if chart else ()
        return FilterSet(
            target_elements=unique_elements((*chart_favorable, *request.preferred_elements)),
            avoid_elements=unique_elements(request.avoid_elements),
            style=request.style,
            source=request.source,
            gender=request.gender,
            pair_sample_size=self.pair_sample_size,
            pool_limit=max(max_results * POOL_MULTIPLIER, MIN_POOL_SIZE),
        )

    # ==================== 生成 ====================

    def generate(self, request: GenerationRequest) -> List[NameCandidate]:
        """
        生成候选名

        Returns:
            按总分降序的候选名列表，长度不超过 max_results（已限制在 1-50）

        Raises:
            InvalidConstraint: 请求结构不合法
            InvalidDate: 生辰不合法
        """
        self.validate(request)
        max_results = self.clamp_max_results(request.max_results)
        surname = self.resolve_surname(request.surname)
        chart = self.chart_for(request)
        favorable, unfavorable = self.element_profile(
            chart, unique_elements(request.preferred_elements), unique_elements(request.avoid_elements)
        )

        filters = self.initial_filters(request, chart, max_results)
        logger.info(
            "起名请求: 姓=%s 字数=%d 结果数=%d 喜用=%s 回避=%s",
            request.surname, request.character_count, max_results,
            ''.join(e.value for e in filters.target_elements) or '-',
            ''.join(e.value for e in filters.avoid_elements) or '-',
        )

        context = _Context(request, surname, chart, favorable, unfavorable)
        collected = self._generate_with(filters, context)
        results = rank_candidates(collected, max_results)

        for step in self.relaxation_steps:
            if len(results) >= max_results:
                break
            filters = step(filters)
            logger.info("候选不足 (%d/%d)，放宽条件: %s", len(results), max_results, step.__name__)
            collected.extend(self._generate_with(filters, context))
            results = rank_candidates(collected, max_results)

        return results

    def _generate_with(self, filters: FilterSet, context: '_Context') -> List[NameCandidate]:
        pool = self._pool(filters, context)
        candidates: List[NameCandidate] = []
        for combo in self._combinations(pool, filters, context.request.character_count):
            try:
                candidates.append(self.build_candidate(context, combo))
            except Exception as e:
                logger.warning(
                    "候选名评分失败，已跳过: %s%s (%s)",
                    context.surname.text, ''.join(c.char for c in combo), e,
                    exc_info=True,
                )
        return candidates

    def _pool(self, filters: FilterSet, context: '_Context') -> List[Character]:
        allowed = filters.allowed_elements
        if not allowed:
            return []
        pool = self.store.query_by_elements(
            allowed, style=filters.style, source=filters.source, gender=filters.gender
        )

        def merit(item):
            index, character = item
            fit = self.scorer.bazi_score([character], context.favorable, context.unfavorable)
            return (-(fit + character_meaning_score(character)), index)

        return [c for _, c in sorted(enumerate(pool), key=merit)]

    @staticmethod
    def _combinations(pool: List[Character], filters: FilterSet,
                      character_count: int) -> Iterable[Tuple[Character, ...]]:
        if character_count == 1:
            return [(c,) for c in pool]
        if filters.pool_limit is not None:
            pool = pool[:filters.pool_limit]
        return islice(ranked_pairs(pool), filters.pair_sample_size)

    def build_candidate(self, context: '_Context', given: Sequence[Character]) -> NameCandidate:
        """为一组用字评分并组装候选名"""
        given = tuple(given)
        given_name = ''.join(c.char for c in given)
        score = self.scorer.score(
            context.surname, given, context.favorable, context.unfavorable,
            with_bazi=context.chart is not None,
        )
        syllables = [split_syllable(p)[0] for p in context.surname.pinyin] + [c.pinyin for c in given]
        inspiration = self.store.find_inspiration(given_name, context.request.source)
        source = None
        if inspiration is not None:
            source = NameSource(
                kind=inspiration.kind,
                title=inspiration.title,
                author=inspiration.author,
                text=inspiration.text,
            )
        return NameCandidate(
            surname=context.surname.text,
            given_name=given_name,
            full_name=context.surname.text + given_name,
            pinyin=' '.join(s for s in syllables if s),
            characters=given,
            score=score,
            source=source,
            explanation=explain(given, score, context.favorable, source),
        )


class _Context:
    """单次生成请求内共享的数据"""
    __slots__ = ('request', 'surname', 'chart', 'favorable', 'unfavorable')

    def __init__(self, request: GenerationRequest, surname: Surname, chart: Optional[FourPillarsChart],
                 favorable: Tuple[FiveElement, ...], unfavorable: Tuple[FiveElement, ...]):
        self.request = request
        self.surname = surname
        self.chart = chart
        self.favorable = favorable
        self.unfavorable = unfavorable


def explain(given: Sequence[Character], score: ScoreBreakdown,
            favorable: Sequence[FiveElement], source: Optional[NameSource] = None) -> str:
    """生成候选名说明"""
    parts = [f"「{c.char}」五行属{c.element.value}，{c.meaning}" for c in given]
    text = '；'.join(parts) + '。'
    matched = [c.char for c in given if c.element in favorable]
    if matched:
        text += f"{'、'.join(matched)}合喜用五行{''.join(e.value for e in favorable)}。"
    text += f"五格 {score.wuge_score} 分，音韵 {score.phonetic_score} 分，综合评级{score.rating.value}。"
    if source is not None:
        origin = f"{source.author}《{source.title}》" if source.author else f"「{source.title}」"
        text += f"出自{origin}：{source.text}"
    return text
