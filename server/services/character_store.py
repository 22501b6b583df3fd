#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
取名字库

CharacterStore 定义生成器依赖的只读字库接口；
InMemoryCharacterStore 从随包发布的 core/data/characters.json 加载汉字、姓氏与诗词出处。
"""

import json
import logging
import os
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from core.data.constants import FiveElement
from core.models.naming_models import Character, Inspiration, Surname

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    'core', 'data', 'characters.json',
)

SOURCE_KINDS = ('poetry', 'classics', 'idioms')

# 风格筛选
MODERN_MAX_FREQUENCY = 3000
POETIC_SOURCES = ('poetry', 'classics')

GENDER_TAGS = {
    'male': ('male', 'neutral'),
    'female': ('female', 'neutral'),
}


class CharacterStore(Protocol):
    """生成器使用的字库接口"""

    def query_by_elements(self, elements: Iterable[FiveElement], style: Optional[str] = None,
                          source: Optional[str] = None, gender: Optional[str] = None) -> List[Character]:
        ...

    def stroke_count_of(self, char: str) -> int:
        ...

    def get(self, char: str) -> Optional[Character]:
        ...

    def get_surname(self, text: str) -> Optional[Surname]:
        ...

    def find_inspiration(self, chars: str, source: Optional[str] = None) -> Optional[Inspiration]:
        ...


class InMemoryCharacterStore:
    """内存字库"""

    def __init__(self, characters: Sequence[Character], surnames: Sequence[Surname] = (),
                 inspirations: Sequence[Inspiration] = ()):
        self._characters: Tuple[Character, ...] = tuple(characters)
        self._by_char: Dict[str, Character] = {c.char: c for c in self._characters}
        self._surnames: Dict[str, Surname] = {s.text: s for s in surnames}
        self._inspirations: Tuple[Inspiration, ...] = tuple(inspirations)

    @classmethod
    def from_json(cls, path: Optional[str] = None) -> 'InMemoryCharacterStore':
        """
        从 JSON 文件加载字库

        Args:
            path: 数据文件路径，默认使用随包数据

        Raises:
            FileNotFoundError: 文件不存在
            ValueError: 数据格式错误
        """
        path = path or DEFAULT_DATA_FILE
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        inspirations = [
            Inspiration(
                kind=item['kind'],
                title=item['title'],
                author=item.get('author', ''),
                text=item['text'],
            )
            for item in data.get('inspirations', [])
        ]

        characters = []
        for item in data.get('characters', []):
            try:
                characters.append(Character(
                    char=item['char'],
                    pinyin=item['pinyin'],
                    tone=int(item['tone']),
                    stroke_count=int(item['strokes']),
                    element=FiveElement.parse(item['element']),
                    meaning=item.get('meaning', ''),
                    frequency=int(item.get('frequency', 0)),
                    hsk_level=item.get('hsk'),
                    gender=item.get('gender', 'neutral'),
                    sources=_sources_of(item['char'], inspirations),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"字库数据格式错误: {item!r}") from e

        surnames = [
            Surname(
                text=item['surname'],
                pinyin=tuple(item['pinyin']),
                strokes=tuple(int(s) for s in item['strokes']),
            )
            for item in data.get('surnames', [])
        ]

        logger.info(
            "字库加载完成: %d 个汉字, %d 个姓氏, %d 条出处 (%s)",
            len(characters), len(surnames), len(inspirations), path,
        )
        return cls(characters, surnames, inspirations)

    def __len__(self) -> int:
        return len(self._characters)

    @property
    def characters(self) -> Tuple[Character, ...]:
        return self._characters

    def query_by_elements(self, elements: Iterable[FiveElement], style: Optional[str] = None,
                          source: Optional[str] = None, gender: Optional[str] = None) -> List[Character]:
        """
        按五行查询用字

        Args:
            elements: 五行集合，为空时不按五行筛选
            style: modern 只取常用字，poetic 只取有诗词出处的字，其他风格不筛选
            source: poetry / classics / idioms 只取对应出处的字，any 或空不筛选
            gender: male / female 排除另一性别倾向的字

        Returns:
            按字库顺序排列的汉字列表
        """
        wanted = set(elements or ())
        allowed_genders = GENDER_TAGS.get(gender or '')

        result = []
        for character in self._characters:
            if wanted and character.element not in wanted:
                continue
            if allowed_genders and character.gender not in allowed_genders:
                continue
            if style == 'modern' and character.frequency >= MODERN_MAX_FREQUENCY:
                continue
            if style == 'poetic' and not any(s in POETIC_SOURCES for s in character.sources):
                continue
            if source in SOURCE_KINDS and source not in character.sources:
                continue
            result.append(character)
        return result

    def get(self, char: str) -> Optional[Character]:
        return self._by_char.get(char)

    def stroke_count_of(self, char: str) -> int:
        """
        康熙笔画数

        Raises:
            KeyError: 字库与姓氏表均未收录
        """
        character = self._by_char.get(char)
        if character is not None:
            return character.stroke_count
        surname = self._surnames.get(char)
        if surname is not None and len(surname.strokes) == 1:
            return surname.strokes[0]
        raise KeyError(char)

    def get_surname(self, text: str) -> Optional[Surname]:
        """取姓氏；姓氏表未收录时用字库中的汉字拼出"""
        surname = self._surnames.get(text)
        if surname is not None:
            return surname
        chars = [self._by_char.get(c) for c in text]
        if text and all(chars):
            return Surname(
                text=text,
                pinyin=tuple(c.tone_pinyin for c in chars),
                strokes=tuple(c.stroke_count for c in chars),
            )
        return None

    def split_full_name(self, full_name: str) -> Tuple[str, str]:
        """拆分姓与名，优先识别复姓"""
        full_name = full_name.strip()
        if len(full_name) > 2 and full_name[:2] in self._surnames:
            return full_name[:2], full_name[2:]
        return full_name[:1], full_name[1:]

    def find_inspiration(self, chars: str, source: Optional[str] = None) -> Optional[Inspiration]:
        """
        查找包含名字用字的诗词典故

        优先返回包含全部用字的出处，其次包含任一用字的出处。
        """
        candidates = [
            item for item in self._inspirations
            if source not in SOURCE_KINDS or item.kind == source
        ]
        for item in candidates:
            if all(c in item.text for c in chars):
                return item
        for item in candidates:
            if any(c in item.text for c in chars):
                return item
        return None


def _sources_of(char: str, inspirations: Sequence[Inspiration]) -> Tuple[str, ...]:
    """汉字出现过的出处类别"""
    return tuple(kind for kind in SOURCE_KINDS if any(
        item.kind == kind and char in item.text for item in inspirations
    ))
