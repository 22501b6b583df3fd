#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名引擎共享日志工具

提供安全的日志输出，捕获 Broken pipe 等异常。
core 与 server 下的模块各自使用 logging.getLogger(__name__)，
由 setup_logging 在进程启动时统一挂载处理器。
"""

import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# 需要挂载处理器的顶层 logger
_ROOT_LOGGERS = ('core', 'server')


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: Optional[str] = None) -> None:
    """
    为 core / server 挂载 SafeStreamHandler（重复调用只更新级别）

    Args:
        level: 日志级别名称，如 INFO、DEBUG，默认 INFO
    """
    log_level = getattr(logging, (level or 'INFO').upper(), logging.INFO)
    for name in _ROOT_LOGGERS:
        target = logging.getLogger(name)
        if not any(isinstance(h, SafeStreamHandler) for h in target.handlers):
            handler = SafeStreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            target.addHandler(handler)
        target.setLevel(log_level)


def safe_log(logger: logging.Logger, level: str, message: str, *args) -> None:
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    在 Web 服务环境中，客户端断开连接时可能触发 Broken pipe 错误
    """
    try:
        log_method = getattr(logger, level, logger.info)
        log_method(message, *args)
    except (BrokenPipeError, OSError):
        pass
