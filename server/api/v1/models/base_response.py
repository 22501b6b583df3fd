#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名接口统一响应模型

成功：{"success": true, "code": 200, "data": {...}}
失败：{"success": false, "code": 400, "error": "姓氏必须为 1-2 个汉字"}
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _now() -> str:
    return datetime.now().isoformat()


class APIResponse(BaseModel):
    """接口响应，data 与 error 二选一"""
    model_config = ConfigDict(extra="allow")

    success: bool = Field(..., description="请求是否成功")
    code: int = Field(default=200, description="业务状态码，与 HTTP 状态码一致")
    data: Optional[Any] = Field(default=None, description="响应数据")
    error: Optional[str] = Field(default=None, description="错误信息")
    message: Optional[str] = Field(default=None, description="附加消息")
    timestamp: str = Field(default_factory=_now, description="响应时间戳")

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "APIResponse":
        """成功响应"""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, code: int = 400) -> "APIResponse":
        """失败响应"""
        return cls(success=False, error=error, code=code)
