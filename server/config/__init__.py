# -*- coding: utf-8 -*-
"""
配置模块
"""

from .app_config import AppConfig, CacheConfig, GeneratorConfig, get_config, reload_config

__all__ = ['AppConfig', 'CacheConfig', 'GeneratorConfig', 'get_config', 'reload_config']
