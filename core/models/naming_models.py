#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名领域模型

四柱、汉字、五格、音韵报告、评分与候选名的不可变值类型。
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple

from core.data.constants import Branch, FiveElement, Stem


@dataclass(frozen=True)
class Pillar:
    """一柱：天干 + 地支"""
    stem: Stem
    branch: Branch

    @property
    def text(self) -> str:
        return f"{self.stem.value}{self.branch.value}"

    @classmethod
    def from_cycle_index(cls, index: int) -> 'Pillar':
        """六十甲子序号（0=甲子）转为一柱"""
        index %= 60
        return cls(Stem.at(index % 10), Branch.at(index % 12))

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FourPillarsChart:
    """八字四柱及喜忌五行"""
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    favorable_elements: Tuple[FiveElement, ...]
    unfavorable_elements: Tuple[FiveElement, ...] = ()
    element_counts: Dict[FiveElement, int] = field(default_factory=dict, compare=False, hash=False)
    day_master_strong: bool = False

    @property
    def pillars(self) -> Tuple[Pillar, Pillar, Pillar, Pillar]:
        return (self.year, self.month, self.day, self.hour)

    @property
    def day_master(self) -> Stem:
        """日主（日干）"""
        return self.day.stem

    def to_dict(self) -> Dict:
        return {
            'year': self.year.text,
            'month': self.month.text,
            'day': self.day.text,
            'hour': self.hour.text,
            'day_master': self.day_master.value,
            'day_master_element': self.day_master.element.value,
            'day_master_strong': self.day_master_strong,
            'element_counts': {e.value: n for e, n in self.element_counts.items()},
            'favorable_elements': [e.value for e in self.favorable_elements],
            'unfavorable_elements': [e.value for e in self.unfavorable_elements],
        }


@dataclass(frozen=True)
class Character:
    """取名用字（只读，由字库提供）"""
    char: str
    pinyin: str
    tone: int
    stroke_count: int
    element: FiveElement
    meaning: str
    frequency: int
    hsk_level: Optional[int] = None
    gender: str = 'neutral'
    sources: Tuple[str, ...] = ()

    @property
    def tone_pinyin(self) -> str:
        """带调号的拼音，如 ming2"""
        return f"{self.pinyin}{self.tone}"


@dataclass(frozen=True)
class Surname:
    """姓氏（支持复姓）"""
    text: str
    pinyin: Tuple[str, ...]
    strokes: Tuple[int, ...]


@dataclass(frozen=True)
class Inspiration:
    """诗词典故、成语出处"""
    kind: str
    title: str
    author: str
    text: str


@dataclass(frozen=True)
class WugeGrids:
    """五格：天格、人格、地格、外格、总格"""
    tian_ge: int
    ren_ge: int
    di_ge: int
    wai_ge: int
    zong_ge: int

    def as_dict(self) -> Dict[str, int]:
        return {
            'tian_ge': self.tian_ge,
            'ren_ge': self.ren_ge,
            'di_ge': self.di_ge,
            'wai_ge': self.wai_ge,
            'zong_ge': self.zong_ge,
        }


@dataclass(frozen=True)
class GridInterpretation:
    """单格数理解释"""
    number: int
    fortune: str
    category: str
    meaning: str


@dataclass(frozen=True)
class WugeAnalysis:
    """五格分析结果"""
    grids: WugeGrids
    interpretations: Dict[str, GridInterpretation] = field(hash=False)
    sancai: Tuple[FiveElement, FiveElement, FiveElement]
    sancai_score: int
    overall_score: int

    def to_dict(self) -> Dict:
        return {
            'grids': self.grids.as_dict(),
            'interpretations': {
                name: {
                    'number': item.number,
                    'fortune': item.fortune,
                    'category': item.category,
                    'meaning': item.meaning,
                }
                for name, item in self.interpretations.items()
            },
            'sancai': ''.join(e.value for e in self.sancai),
            'sancai_score': self.sancai_score,
            'overall_score': self.overall_score,
        }


@dataclass(frozen=True)
class PhoneticReport:
    """音韵分析报告"""
    score: int
    warnings: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    tones: Tuple[int, ...] = ()

    def to_dict(self) -> Dict:
        return {
            'score': self.score,
            'warnings': list(self.warnings),
            'suggestions': list(self.suggestions),
            'tones': list(self.tones),
        }


class Rating(Enum):
    """综合评级"""
    EXCELLENT = '优秀'
    GOOD = '良好'
    AVERAGE = '中等'
    FAIR = '一般'
    POOR = '欠佳'


@dataclass(frozen=True)
class ScoreBreakdown:
    """四维评分"""
    bazi_score: int
    wuge_score: int
    phonetic_score: int
    meaning_score: int
    overall: int
    rating: Rating

    def to_dict(self) -> Dict:
        return {
            'bazi_score': self.bazi_score,
            'wuge_score': self.wuge_score,
            'phonetic_score': self.phonetic_score,
            'meaning_score': self.meaning_score,
            'overall': self.overall,
            'rating': self.rating.value,
        }


@dataclass(frozen=True)
class NameSource:
    """名字出处"""
    kind: str
    title: str
    author: str
    text: str


@dataclass(frozen=True)
class NameCandidate:
    """候选名"""
    surname: str
    given_name: str
    full_name: str
    pinyin: str
    characters: Tuple[Character, ...]
    score: ScoreBreakdown
    source: Optional[NameSource] = None
    explanation: str = ''

    def to_dict(self) -> Dict:
        return {
            'surname': self.surname,
            'given_name': self.given_name,
            'full_name': self.full_name,
            'pinyin': self.pinyin,
            'characters': [
                {
                    'char': c.char,
                    'pinyin': c.pinyin,
                    'tone': c.tone,
                    'stroke_count': c.stroke_count,
                    'element': c.element.value,
                    'meaning': c.meaning,
                }
                for c in self.characters
            ],
            'score': self.score.to_dict(),
            'source': None if self.source is None else {
                'kind': self.source.kind,
                'title': self.source.title,
                'author': self.source.author,
                'text': self.source.text,
            },
            'explanation': self.explanation,
        }


@dataclass(frozen=True)
class GenerationRequest:
    """起名请求"""
    surname: str
    gender: str = 'neutral'
    birth_date: Optional[date] = None
    birth_hour: Optional[int] = None
    preferred_elements: Tuple[FiveElement, ...] = ()
    avoid_elements: Tuple[FiveElement, ...] = ()
    style: Optional[str] = None
    source: Optional[str] = None
    character_count: int = 2
    max_results: int = 20
