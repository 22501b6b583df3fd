#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
缓存键生成器 - 统一管理起名引擎各类缓存键
"""

from typing import Optional, Sequence

from core.data.constants import FiveElement


class CacheKeyGenerator:
    """缓存键生成器"""

    @staticmethod
    def chart_key(year: int, month: int, day: int, hour: Optional[int],
                  late_zi_next_day: bool = False) -> str:
        """
        排盘缓存键：bazi:{年}-{月}-{日}-{时}

        未提供时辰时按 0 点排盘，与 hour=0 共用同一个键。
        启用晚子时换日规则时追加 :late_zi（只影响 23 点）。
        """
        hour = 0 if hour is None else hour
        key = f"bazi:{year}-{month}-{day}-{hour}"
        if late_zi_next_day and hour == 23:
            key += ":late_zi"
        return key

    @staticmethod
    def wuge_key(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> str:
        """五格缓存键：wuge:{姓氏笔画}:{名字笔画}，笔画以 - 连接"""
        surname_part = '-'.join(str(s) for s in surname_strokes)
        given_part = '-'.join(str(s) for s in given_strokes)
        return f"wuge:{surname_part}:{given_part}"

    @staticmethod
    def phonetics_key(full_name: str) -> str:
        """音韵缓存键：phonetics:{全名}"""
        return f"phonetics:{full_name}"

    @staticmethod
    def name_score_key(surname: str, given_name: str,
                       favorable: Optional[Sequence[FiveElement]] = None,
                       unfavorable: Sequence[FiveElement] = (),
                       with_bazi: bool = True) -> str:
        """
        名字评分缓存键：name_score:{姓}:{名}[:with_bazi:{喜}/{忌}]

        评分依赖喜忌五行，带八字时把喜忌写入键，避免不同命盘共用结果；
        无八字仅有偏好/回避五行时写作 :prefer:{喜}/{忌}。
        """
        key = f"name_score:{surname}:{given_name}"
        if with_bazi or favorable or unfavorable:
            favorable_part = ''.join(e.value for e in favorable or ())
            unfavorable_part = ''.join(e.value for e in unfavorable)
            tag = 'with_bazi' if with_bazi else 'prefer'
            key += f":{tag}:{favorable_part}/{unfavorable_part}"
        return key
