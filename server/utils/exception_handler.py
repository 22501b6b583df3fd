"""
统一异常处理中间件

路由未处理的异常在这里转换为统一的 500 响应（领域异常由各路由自行返回 400）
"""

import logging
import traceback
from typing import Any, Callable

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from server.api.v1.models.base_response import APIResponse
from server.config.env_config import is_production

logger = logging.getLogger(__name__)


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """异常处理中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"未处理的异常: {e}\n{traceback.format_exc()}")

            # 生产环境不暴露详细错误信息
            if is_production():
                error_detail = "服务器内部错误，请稍后重试"
            else:
                error_detail = f"错误: {e}"
            return JSONResponse(
                status_code=500,
                content=APIResponse.fail(error=error_detail, code=500).model_dump(),
            )
