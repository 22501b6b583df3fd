#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
测试统一配置管理
"""

import os
from unittest.mock import patch

import pytest

from server.config.app_config import (
    AppConfig,
    CacheConfig,
    GeneratorConfig,
    get_config,
    reload_config,
)
from server.config.env_config import EnvConfig


class TestEnvConfig:
    """环境配置测试类"""

    def test_default_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            env_config = EnvConfig()
            assert env_config.env == "local"
            assert env_config.is_local_dev is True

    def test_environment_aliases(self):
        with patch.dict(os.environ, {"APP_ENV": "prod"}, clear=True):
            assert EnvConfig().is_production is True
        with patch.dict(os.environ, {"ENV": "stage", "APP_ENV": "production"}, clear=True):
            assert EnvConfig().env == "staging"

    def test_bool_and_int(self):
        with patch.dict(os.environ, {"FLAG": "yes", "NUM": "42", "BAD": "x"}, clear=True):
            env_config = EnvConfig()
            assert env_config.get_bool_config("FLAG") is True
            assert env_config.get_bool_config("MISSING") is False
            assert env_config.get_int_config("NUM") == 42
            assert env_config.get_int_config("BAD", 7) == 7

    def test_required_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING"):
                EnvConfig().get_config("MISSING", required=True)


class TestConfig:
    """配置测试类"""

    def test_cache_config_from_env(self):
        """测试从环境变量创建缓存配置"""
        with patch.dict(os.environ, {
            'CACHE_MAX_SIZE': '500',
            'CACHE_CHART_TTL': '10',
            'CACHE_WUGE_TTL': '20',
            'CACHE_PHONETICS_TTL': '30',
            'CACHE_NAME_SCORE_TTL': '40',
        }):
            config = CacheConfig.from_env()

            assert config.max_size == 500
            assert config.chart_ttl == 10
            assert config.wuge_ttl == 20
            assert config.phonetics_ttl == 30
            assert config.name_score_ttl == 40

    def test_cache_config_defaults(self):
        """测试缓存配置默认值"""
        with patch.dict(os.environ, {}, clear=True):
            config = CacheConfig.from_env()

            assert config.max_size == 10000
            assert config.chart_ttl == 86400
            assert config.wuge_ttl == 604800

    def test_generator_config_from_env(self):
        """测试从环境变量创建生成配置"""
        with patch.dict(os.environ, {
            'NAMING_DEFAULT_MAX_RESULTS': '10',
            'NAMING_MAX_RESULTS_LIMIT': '30',
            'NAMING_PAIR_SAMPLE_SIZE': '100',
            'LATE_ZI_NEXT_DAY': 'true',
            'NAMING_DATA_FILE': '/tmp/characters.json',
        }):
            config = GeneratorConfig.from_env()

            assert config.default_max_results == 10
            assert config.max_results_limit == 30
            assert config.pair_sample_size == 100
            assert config.late_zi_next_day is True
            assert config.data_file == '/tmp/characters.json'

    def test_generator_config_defaults(self):
        """测试生成配置默认值"""
        with patch.dict(os.environ, {}, clear=True):
            config = GeneratorConfig.from_env()

            assert config.default_max_results == 20
            assert config.max_results_limit == 50
            assert config.pair_sample_size == 400
            assert config.late_zi_next_day is False
            assert config.data_file is None

    def test_app_config_from_env(self):
        """测试从环境变量创建应用配置"""
        with patch.dict(os.environ, {
            'APP_ENV': 'production',
            'DEBUG': 'true',
            'LOG_LEVEL': 'DEBUG',
        }, clear=True):
            config = AppConfig.from_env()

            assert config.env == 'production'
            assert config.debug is True
            assert config.log_level == 'DEBUG'
            assert isinstance(config.cache, CacheConfig)
            assert isinstance(config.generator, GeneratorConfig)

    def test_get_config_singleton(self):
        """测试配置单例"""
        config1 = get_config()
        config2 = get_config()

        assert config1 is config2

    def test_reload_config(self):
        """测试重新加载配置"""
        with patch.dict(os.environ, {'NAMING_PAIR_SAMPLE_SIZE': '123'}):
            config = reload_config()
            assert config.generator.pair_sample_size == 123
            assert get_config() is config
        reload_config()
