# -*- coding: utf-8 -*-
"""
服务器工具模块
"""

from .computation_cache import ComputationCache, NamingCache

__all__ = ['ComputationCache', 'NamingCache']
