#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

提供统一的环境判断和配置读取，避免配置分散
"""

import os
from typing import Literal, Optional

# 环境类型定义
Environment = Literal["local", "staging", "production"]


class EnvConfig:
    """
    统一环境配置管理器

    环境名在创建时确定，配置值每次读取都从环境变量获取
    """

    def __init__(self):
        """初始化环境配置"""
        self._env: Environment = self._detect_environment()

    @staticmethod
    def _detect_environment() -> Environment:
        """检测当前环境：优先读取 ENV，其次 APP_ENV，默认 local"""
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()
        if env_value in ("staging", "stage"):
            return "staging"
        if env_value in ("prod", "production"):
            return "production"
        # local / dev / development 及未知值均按本地开发处理
        return "local"

    @property
    def env(self) -> Environment:
        """获取当前环境"""
        return self._env

    @property
    def is_local_dev(self) -> bool:
        """是否为本地开发环境"""
        return self._env == "local"

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self._env == "production"

    def get_config(self, key: str, default: str = None, required: bool = False) -> Optional[str]:
        """
        获取配置值（从环境变量）

        Args:
            key: 配置键
            default: 默认值
            required: 是否必需（如果为True且不存在则抛出异常）

        Raises:
            ValueError: 如果 required=True 且配置不存在
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        """获取布尔类型配置"""
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        """获取整数类型配置，无法解析时返回默认值"""
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            return default


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def is_production() -> bool:
    """是否为生产环境（便捷函数）"""
    return get_env_config().is_production
