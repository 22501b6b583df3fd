#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

from dataclasses import dataclass, field
from typing import Optional

# 使用统一环境配置
from server.config.env_config import EnvConfig


@dataclass
class CacheConfig:
    """计算缓存配置（TTL 单位：秒）"""
    max_size: int = 10000
    chart_ttl: int = 86400          # 1天 - 排盘
    wuge_ttl: int = 604800          # 7天 - 五格
    phonetics_ttl: int = 86400      # 1天 - 音韵
    name_score_ttl: int = 604800    # 7天 - 名字评分

    @classmethod
    def from_env(cls) -> 'CacheConfig':
        """从环境变量创建配置"""
        env_config = EnvConfig()
        return cls(
            max_size=env_config.get_int_config('CACHE_MAX_SIZE', 10000),
            chart_ttl=env_config.get_int_config('CACHE_CHART_TTL', 86400),
            wuge_ttl=env_config.get_int_config('CACHE_WUGE_TTL', 604800),
            phonetics_ttl=env_config.get_int_config('CACHE_PHONETICS_TTL', 86400),
            name_score_ttl=env_config.get_int_config('CACHE_NAME_SCORE_TTL', 604800),
        )


@dataclass
class GeneratorConfig:
    """起名生成配置"""
    default_max_results: int = 20
    max_results_limit: int = 50
    pair_sample_size: int = 400
    late_zi_next_day: bool = False
    data_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'GeneratorConfig':
        """从环境变量创建配置"""
        env_config = EnvConfig()
        return cls(
            default_max_results=env_config.get_int_config('NAMING_DEFAULT_MAX_RESULTS', 20),
            max_results_limit=env_config.get_int_config('NAMING_MAX_RESULTS_LIMIT', 50),
            pair_sample_size=env_config.get_int_config('NAMING_PAIR_SAMPLE_SIZE', 400),
            late_zi_next_day=env_config.get_bool_config('LATE_ZI_NEXT_DAY', default=False),
            data_file=env_config.get_config('NAMING_DATA_FILE'),
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'

    # 子配置
    cache: CacheConfig = field(default_factory=CacheConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = EnvConfig()
        return cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO'),
            cache=CacheConfig.from_env(),
            generator=GeneratorConfig.from_env(),
        )


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置"""
    global _config
    _config = AppConfig.from_env()
    return _config
