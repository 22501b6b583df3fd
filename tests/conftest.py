#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（字库、计算缓存、生成器）
- 测试钩子
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="session")
def character_store():
    """
    随包字库（整个测试会话共享，只读）

    Returns:
        InMemoryCharacterStore 实例
    """
    from server.services.character_store import InMemoryCharacterStore
    return InMemoryCharacterStore.from_json()


@pytest.fixture(scope="function")
def naming_cache():
    """
    空的计算缓存（每个测试函数独立）

    Returns:
        NamingCache 实例
    """
    from server.utils.computation_cache import NamingCache
    return NamingCache.in_memory(max_size=1000)


@pytest.fixture(scope="function")
def name_generator(character_store, naming_cache):
    """
    使用随包字库与独立缓存的生成器

    Returns:
        NameGenerator 实例
    """
    from core.generators.name_generator import NameGenerator
    return NameGenerator(character_store, naming_cache)


@pytest.fixture(scope="function")
def sample_generate_request() -> Dict[str, Any]:
    """
    示例起名请求

    Returns:
        起名请求字典
    """
    return {
        "surname": "李",
        "gender": "male",
        "birth_date": "1990-12-23",
        "birth_hour": 8,
        "max_results": 10,
    }


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    # 添加自定义标记说明
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "api: API 测试")


def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    自动为测试添加标记
    """
    for item in items:
        # 根据路径自动添加标记
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        elif "api" in item.nodeid:
            item.add_marker(pytest.mark.api)
