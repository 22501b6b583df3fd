# -*- coding: utf-8 -*-
"""
起名引擎核心：排盘、五行、五格、音韵、评分与候选名生成
"""
