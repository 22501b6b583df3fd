#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八十一数理吉凶表

键为 1-81 的数理，值为 (吉凶, 释义)。超过 81 的数按 ((n - 1) % 81) + 1 归一。
"""

from typing import Dict, Tuple

# 吉凶 -> 分值
FORTUNE_POINTS: Dict[str, int] = {
    '大吉': 95,
    '吉': 80,
    '半吉': 60,
    '凶': 40,
    '大凶': 20,
}

# 吉凶 -> 类别
FORTUNE_CATEGORY: Dict[str, str] = {
    '大吉': 'auspicious',
    '吉': 'auspicious',
    '半吉': 'neutral',
    '凶': 'inauspicious',
    '大凶': 'inauspicious',
}

NUMEROLOGY_81: Dict[int, Tuple[str, str]] = {
    1: ('大吉', '天地开泰，万物资始，繁荣富贵'),
    2: ('凶', '混沌未定，分离破败，动荡不安'),
    3: ('大吉', '立身处世，有贵人助，成功发达'),
    4: ('凶', '万事不成，破坏家运，孤苦伶仃'),
    5: ('大吉', '阴阳和合，生意兴隆，名利双收'),
    6: ('大吉', '天官赐福，德高望重，大有作为'),
    7: ('吉', '刚毅果断，勇往直前，排除万难'),
    8: ('吉', '意志刚健，勤勉发展，富于进取'),
    9: ('凶', '虽有才能，无奈遭难，有始无终'),
    10: ('凶', '乌云遮月，暗淡无光，空费心力'),
    11: ('大吉', '草木逢春，枝叶沾露，稳健着实'),
    12: ('凶', '薄弱无力，孤立无援，外祥内苦'),
    13: ('大吉', '天赋吉运，德望兼备，继续努力'),
    14: ('凶', '忍得苦难，必有后福，是成是败'),
    15: ('大吉', '谦恭做事，外得人和，大事成就'),
    16: ('大吉', '能获众望，成就大业，名利双收'),
    17: ('吉', '排除万难，有贵人助，把握时机'),
    18: ('大吉', '经商做事，顺利昌隆，如能慎始'),
    19: ('凶', '成功虽早，慎防亏空，内外不和'),
    20: ('凶', '智高志大，历尽艰难，焦心忧劳'),
    21: ('大吉', '先历困苦，后得幸福，霜雪梅花'),
    22: ('凶', '秋草逢霜，怀才不遇，忧愁怨苦'),
    23: ('大吉', '旭日东升，壮丽壮观，权威旺盛'),
    24: ('大吉', '锦绣前程，须靠自力，多用智谋'),
    25: ('吉', '天时地利，只欠人和，讲信修睦'),
    26: ('凶', '波澜起伏，千变万化，凌驾万难'),
    27: ('凶', '一成一败，一盛一衰，惟靠谨慎'),
    28: ('大凶', '鱼临旱地，难逃厄运，此数大凶'),
    29: ('吉', '如龙得云，青云直上，智谋奋进'),
    30: ('半吉', '吉凶参半，得失相伴，投机取巧'),
    31: ('大吉', '此数大吉，名利双收，渐进向上'),
    32: ('大吉', '池中之龙，风云际会，一跃上天'),
    33: ('大吉', '意气用事，人和必失，如能慎始'),
    34: ('大凶', '灾难不绝，难望成功，此数大凶'),
    35: ('吉', '中吉之数，进退保守，生意安稳'),
    36: ('凶', '波澜重叠，常陷穷困，动不如静'),
    37: ('大吉', '逢凶化吉，吉人天相，风调雨顺'),
    38: ('半吉', '名虽可得，利则难获，艺界发展'),
    39: ('大吉', '云开见月，虽有劳碌，光明坦途'),
    40: ('半吉', '一盛一衰，浮沉不定，知难而退'),
    41: ('大吉', '天赋吉运，德望兼备，继续努力'),
    42: ('凶', '事业不专，十九不成，专心不移'),
    43: ('凶', '雨夜之花，外祥内苦，忍耐自重'),
    44: ('凶', '虽用心计，事难遂愿，贪功好进'),
    45: ('大吉', '杨柳遇春，绿叶发枝，冲破难关'),
    46: ('凶', '坎坷不平，艰难重重，若无耐心'),
    47: ('大吉', '有贵人助，可成大业，虽遇不幸'),
    48: ('大吉', '美花丰实，鹤立鸡群，名利俱全'),
    49: ('凶', '吉凶互见，一成一败，凶中有吉'),
    50: ('半吉', '一盛一衰，浮沉不常，自重自处'),
    51: ('半吉', '盛衰参半，先吉后凶，先凶后吉'),
    52: ('大吉', '草木逢春，雨过天晴，渡过难关'),
    53: ('半吉', '盛衰参半，外祥内苦，先吉后凶'),
    54: ('大凶', '虽倾全力，难望成功，此数大凶'),
    55: ('半吉', '外观隆昌，内隐祸患，克服难关'),
    56: ('凶', '事与愿违，终难成功，欲速不达'),
    57: ('吉', '努力经营，时来运转，旷野枯草'),
    58: ('半吉', '先苦后甜，先甜后苦，如能持之'),
    59: ('凶', '遇事犹豫，难望成事，大刀阔斧'),
    60: ('凶', '黑暗无光，心迷意乱，出尔反尔'),
    61: ('大吉', '云遮半月，内隐风波，应自谨慎'),
    62: ('凶', '烦闷懊恼，事事难展，自防灾祸'),
    63: ('大吉', '万物化育，繁荣之象，专心一意'),
    64: ('凶', '见异思迁，十九不成，徒劳无功'),
    65: ('大吉', '吉运自来，能享盛名，把握机会'),
    66: ('凶', '黑夜漫长，进退维谷，内外不和'),
    67: ('大吉', '天赋幸运，四通八达，家道繁昌'),
    68: ('大吉', '思虑周详，计划力行，不失先机'),
    69: ('凶', '动摇不安，常陷逆境，不得时运'),
    70: ('凶', '惨淡经营，难免贫困，此数不吉'),
    71: ('半吉', '吉凶参半，惟赖勇气，贯彻力行'),
    72: ('凶', '利害混集，凶多吉少，得而复失'),
    73: ('半吉', '安乐自来，自然吉祥，力行不懈'),
    74: ('凶', '利不及费，坐食山空，如无章法'),
    75: ('半吉', '吉中带凶，欲速不达，进不如守'),
    76: ('大凶', '此数大凶，破产之象，宜速改名'),
    77: ('半吉', '先苦后甘，先甘后苦，如能守成'),
    78: ('半吉', '有得有失，华而不实，须防劫财'),
    79: ('凶', '如走夜路，前途无光，希望不大'),
    80: ('凶', '得而复失，枉费心机，守成无贪'),
    81: ('大吉', '最极之数，还本归元，能得繁荣'),
}


def reduce_number(value: int) -> int:
    """将任意正整数归一到 1-81"""
    return ((value - 1) % 81) + 1
