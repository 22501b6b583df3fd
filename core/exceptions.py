#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名引擎异常定义

均继承 ValueError，API 层统一映射为 400。
"""


class NamingError(ValueError):
    """起名引擎异常基类"""


class InvalidDate(NamingError):
    """出生日期或时辰不合法"""


class InvalidConstraint(NamingError):
    """请求结构不合法（如字数不是 1 或 2）"""
