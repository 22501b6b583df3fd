#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import json
import logging
import os
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import Response

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 优先加载 .env 文件（必须在读取配置之前）
env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path)

from core.naming_logging import setup_logging
from server.api.v1.naming import router as naming_router
from server.config.app_config import get_config
from server.utils.exception_handler import ExceptionHandlerMiddleware

config = get_config()
setup_logging(config.log_level)
logger = logging.getLogger(__name__)


# 自定义UTF-8 JSONResponse类，确保中文正确编码
class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,  # 不转义非ASCII字符
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


app = FastAPI(
    title="命名评分 API",
    description="按八字、五格、音韵与字义为姓氏生成并排序候选名",
    version="1.0.0",
    debug=config.debug,
    default_response_class=UTF8JSONResponse,
)


# 添加请求日志中间件
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录请求日志，包括处理时间"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )
    return response


app.add_middleware(ExceptionHandlerMiddleware)

# 注册路由
app.include_router(naming_router, prefix="/api/v1", tags=["起名"])


@app.get("/health")
async def health_check():
    """健康检查"""
    return {"status": "healthy", "env": config.env, "timestamp": time.time()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8001")))
