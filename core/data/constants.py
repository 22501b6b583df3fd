#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名引擎基础常量

天干、地支、五行及其生克关系、五虎遁、五鼠遁等固定表。
所有表以枚举为键，避免字符串查表出现 KeyError。
"""

from enum import Enum
from typing import Dict, Tuple


class FiveElement(Enum):
    """五行"""
    METAL = '金'
    WOOD = '木'
    WATER = '水'
    FIRE = '火'
    EARTH = '土'

    @property
    def english(self) -> str:
        return self.name.capitalize()

    @property
    def generates(self) -> 'FiveElement':
        """我生"""
        return ELEMENT_GENERATION[self]

    @property
    def generated_by(self) -> 'FiveElement':
        """生我"""
        return ELEMENT_GENERATED_BY[self]

    @property
    def restrains(self) -> 'FiveElement':
        """我克"""
        return ELEMENT_RESTRAINT[self]

    @property
    def restrained_by(self) -> 'FiveElement':
        """克我"""
        return ELEMENT_RESTRAINED_BY[self]

    @classmethod
    def parse(cls, value) -> 'FiveElement':
        """
        解析五行，支持中文（金/木/水/火/土）和英文名（metal/Wood...）

        Raises:
            ValueError: 无法识别的五行
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for element in cls:
            if text == element.value or text.upper() == element.name:
                return element
        raise ValueError(f"无法识别的五行: {value!r}")


# 五行相生：木生火，火生土，土生金，金生水，水生木
ELEMENT_GENERATION: Dict[FiveElement, FiveElement] = {
    FiveElement.WOOD: FiveElement.FIRE,
    FiveElement.FIRE: FiveElement.EARTH,
    FiveElement.EARTH: FiveElement.METAL,
    FiveElement.METAL: FiveElement.WATER,
    FiveElement.WATER: FiveElement.WOOD,
}

# 五行相克：木克土，土克水，水克火，火克金，金克木
ELEMENT_RESTRAINT: Dict[FiveElement, FiveElement] = {
    FiveElement.WOOD: FiveElement.EARTH,
    FiveElement.EARTH: FiveElement.WATER,
    FiveElement.WATER: FiveElement.FIRE,
    FiveElement.FIRE: FiveElement.METAL,
    FiveElement.METAL: FiveElement.WOOD,
}

ELEMENT_GENERATED_BY: Dict[FiveElement, FiveElement] = {v: k for k, v in ELEMENT_GENERATION.items()}
ELEMENT_RESTRAINED_BY: Dict[FiveElement, FiveElement] = {v: k for k, v in ELEMENT_RESTRAINT.items()}

# 展示顺序
ALL_ELEMENTS: Tuple[FiveElement, ...] = (
    FiveElement.METAL,
    FiveElement.WOOD,
    FiveElement.WATER,
    FiveElement.FIRE,
    FiveElement.EARTH,
)


class Stem(Enum):
    """天干"""
    JIA = '甲'
    YI = '乙'
    BING = '丙'
    DING = '丁'
    WU = '戊'
    JI = '己'
    GENG = '庚'
    XIN = '辛'
    REN = '壬'
    GUI = '癸'

    @property
    def index(self) -> int:
        return _STEM_INDEX[self]

    @property
    def element(self) -> FiveElement:
        return STEM_ELEMENTS[self.index]

    @property
    def yin_yang(self) -> str:
        return '阳' if self.index % 2 == 0 else '阴'

    @classmethod
    def at(cls, index: int) -> 'Stem':
        return STEMS[index % 10]


class Branch(Enum):
    """地支"""
    ZI = '子'
    CHOU = '丑'
    YIN = '寅'
    MAO = '卯'
    CHEN = '辰'
    SI = '巳'
    WU = '午'
    WEI = '未'
    SHEN = '申'
    YOU = '酉'
    XU = '戌'
    HAI = '亥'

    @property
    def index(self) -> int:
        return _BRANCH_INDEX[self]

    @property
    def element(self) -> FiveElement:
        return BRANCH_ELEMENTS[self.index]

    @property
    def zodiac(self) -> str:
        return BRANCH_ZODIAC[self.index]

    @classmethod
    def at(cls, index: int) -> 'Branch':
        return BRANCHES[index % 12]


STEMS: Tuple[Stem, ...] = tuple(Stem)
BRANCHES: Tuple[Branch, ...] = tuple(Branch)
_STEM_INDEX = {stem: i for i, stem in enumerate(STEMS)}
_BRANCH_INDEX = {branch: i for i, branch in enumerate(BRANCHES)}

# 按天干序号：甲乙木，丙丁火，戊己土，庚辛金，壬癸水
STEM_ELEMENTS: Tuple[FiveElement, ...] = (
    FiveElement.WOOD, FiveElement.WOOD,
    FiveElement.FIRE, FiveElement.FIRE,
    FiveElement.EARTH, FiveElement.EARTH,
    FiveElement.METAL, FiveElement.METAL,
    FiveElement.WATER, FiveElement.WATER,
)

# 按地支序号：子水 丑土 寅木 卯木 辰土 巳火 午火 未土 申金 酉金 戌土 亥水
BRANCH_ELEMENTS: Tuple[FiveElement, ...] = (
    FiveElement.WATER, FiveElement.EARTH,
    FiveElement.WOOD, FiveElement.WOOD,
    FiveElement.EARTH, FiveElement.FIRE,
    FiveElement.FIRE, FiveElement.EARTH,
    FiveElement.METAL, FiveElement.METAL,
    FiveElement.EARTH, FiveElement.WATER,
)

BRANCH_ZODIAC: Tuple[str, ...] = ('鼠', '牛', '虎', '兔', '龙', '蛇', '马', '羊', '猴', '鸡', '狗', '猪')

# 五虎遁：年干 index % 5 -> 寅月天干
# 甲己之年丙作首，乙庚之岁戊为头，丙辛必定寻庚起，丁壬壬位顺行流，戊癸何方发，甲寅之上好追求
FIVE_TIGERS_START: Tuple[Stem, ...] = (Stem.BING, Stem.WU, Stem.GENG, Stem.REN, Stem.JIA)

# 五鼠遁：日干 index % 5 -> 子时天干
# 甲己还加甲，乙庚丙作初，丙辛从戊起，丁壬庚子居，戊癸何方发，壬子是真途
FIVE_RATS_START: Tuple[Stem, ...] = (Stem.JIA, Stem.BING, Stem.WU, Stem.GENG, Stem.REN)

# 十二节 -> 月支
JIE_MONTH_BRANCH: Dict[str, Branch] = {
    '立春': Branch.YIN,
    '惊蛰': Branch.MAO,
    '清明': Branch.CHEN,
    '立夏': Branch.SI,
    '芒种': Branch.WU,
    '小暑': Branch.WEI,
    '立秋': Branch.SHEN,
    '白露': Branch.YOU,
    '寒露': Branch.XU,
    '立冬': Branch.HAI,
    '大雪': Branch.ZI,
    '小寒': Branch.CHOU,
}

# lunar_python 节气表跨年边界使用的拼音键
JIE_KEY_ALIASES: Dict[str, str] = {
    'DA_XUE': '大雪',
    'XIAO_HAN': '小寒',
    'LI_CHUN': '立春',
    'JING_ZHE': '惊蛰',
}
