#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
计算结果缓存 - 进程内 LRU + TTL

排盘、五格、音韵、名字评分都是纯函数，结果不可变，
相同输入重复计算并覆盖写入无副作用，因此只需在插入/淘汰时加锁。

NamingCache 在进程启动时创建一次，通过构造参数注入到生成器与服务中。
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

_MISSING = object()


class ComputationCache:
    """线程安全的 LRU 缓存，条目按 TTL 过期"""

    def __init__(self, max_size: int = 10000, ttl: Optional[float] = 3600, name: str = 'default'):
        """
        初始化缓存

        Args:
            max_size: 最大缓存条目数，超出时淘汰最久未使用的条目
            ttl: 缓存过期时间（秒），None 表示不过期
            name: 缓存名称，用于日志与统计
        """
        if max_size <= 0:
            raise ValueError("max_size 必须为正整数")
        self.max_size = max_size
        self.ttl = ttl
        self.name = name
        self._cache: 'OrderedDict[str, Tuple[Any, float]]' = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def _expired(self, stored_at: float, now: float) -> bool:
        return self.ttl is not None and now - stored_at > self.ttl

    def get(self, key: str, default: Any = None) -> Any:
        """从缓存获取结果，不存在或已过期返回 default"""
        with self._lock:
            entry = self._cache.get(key, _MISSING)
            if entry is _MISSING:
                self._misses += 1
                return default

            value, stored_at = entry
            if self._expired(stored_at, time.time()):
                del self._cache[key]
                self._expirations += 1
                self._misses += 1
                return default

            self._cache.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: str, value: Any) -> None:
        """设置缓存"""
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            self._cache[key] = (value, time.time())
            while len(self._cache) > self.max_size:
                self._cache.popitem(last=False)
                self._evictions += 1

    def get_or_compute(self, key: str, factory: Callable[[], Any]) -> Any:
        """
        命中直接返回，否则计算并写入

        计算在锁外进行，并发下同一个键可能被重复计算，结果相同。
        factory 抛出的异常原样向上传递，不写入缓存。
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value
        value = factory()
        self.set(key, value)
        return value

    def delete(self, key: str) -> bool:
        """删除缓存，返回键是否存在"""
        with self._lock:
            return self._cache.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """清空缓存与统计"""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._expirations = 0

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._cache.get(key, _MISSING)
            return entry is not _MISSING and not self._expired(entry[1], time.time())

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def stats(self) -> Dict[str, Any]:
        """获取缓存统计信息"""
        with self._lock:
            total = self._hits + self._misses
            return {
                'name': self.name,
                'size': len(self._cache),
                'max_size': self.max_size,
                'ttl': self.ttl,
                'hits': self._hits,
                'misses': self._misses,
                'evictions': self._evictions,
                'expirations': self._expirations,
                'hit_rate_percent': round(self._hits / total * 100, 2) if total else 0.0,
            }


class NamingCache:
    """起名引擎的四类计算缓存：排盘、五格、音韵、名字评分"""

    def __init__(self, chart: ComputationCache, wuge: ComputationCache,
                 phonetics: ComputationCache, name_score: ComputationCache):
        self.chart = chart
        self.wuge = wuge
        self.phonetics = phonetics
        self.name_score = name_score

    @classmethod
    def from_config(cls, cache_config) -> 'NamingCache':
        """按 CacheConfig 创建"""
        logger.debug("创建计算缓存: max_size=%s", cache_config.max_size)
        return cls(
            chart=ComputationCache(cache_config.max_size, cache_config.chart_ttl, 'chart'),
            wuge=ComputationCache(cache_config.max_size, cache_config.wuge_ttl, 'wuge'),
            phonetics=ComputationCache(cache_config.max_size, cache_config.phonetics_ttl, 'phonetics'),
            name_score=ComputationCache(cache_config.max_size, cache_config.name_score_ttl, 'name_score'),
        )

    @classmethod
    def in_memory(cls, max_size: int = 10000, ttl: Optional[float] = None) -> 'NamingCache':
        """统一大小与 TTL 的缓存，测试与脚本使用"""
        return cls(
            chart=ComputationCache(max_size, ttl, 'chart'),
            wuge=ComputationCache(max_size, ttl, 'wuge'),
            phonetics=ComputationCache(max_size, ttl, 'phonetics'),
            name_score=ComputationCache(max_size, ttl, 'name_score'),
        )

    def _all(self):
        return (self.chart, self.wuge, self.phonetics, self.name_score)

    def clear(self) -> None:
        for cache in self._all():
            cache.clear()

    def stats(self) -> Dict[str, Dict[str, Any]]:
        return {cache.name: cache.stats() for cache in self._all()}
