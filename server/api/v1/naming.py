#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名 API

- POST /naming/generate: 按姓氏、生辰与偏好生成排序后的候选名
- POST /naming/analyze: 分析完整姓名的四维评分
- GET /naming/cache/stats: 计算缓存统计
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.exceptions import NamingError
from core.naming_logging import safe_log
from server.api.v1.models.base_response import APIResponse
from server.api.v1.models.naming_models import NameAnalyzeRequest, NameGenerateRequest
from server.services.naming_service import NamingService, get_naming_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _domain_error(e: NamingError) -> JSONResponse:
    """领域异常统一返回 400"""
    safe_log(logger, 'warning', "起名请求参数错误: %s", e)
    return JSONResponse(status_code=400, content=APIResponse.fail(error=str(e), code=400).model_dump())


@router.post("/naming/generate", response_model=APIResponse, summary="生成候选名")
def generate_names(request: NameGenerateRequest,
                   service: NamingService = Depends(get_naming_service)):
    """
    生成候选名

    根据姓氏与可选生辰：
    1. 排盘得到喜用五行，合并偏好五行并去掉回避五行
    2. 从字库取字组合，按八字、五格、音韵、字义四维评分
    3. 按总分降序返回，候选不足时自动放宽条件
    """
    logger.info("📥 收到起名请求: %s %s %s", request.surname, request.birth_date, request.birth_hour)
    try:
        candidates = service.generate(request.to_generation_request())
    except NamingError as e:
        return _domain_error(e)

    return APIResponse.ok(
        data={
            'total': len(candidates),
            'names': [c.to_dict() for c in candidates],
        },
    )


@router.post("/naming/analyze", response_model=APIResponse, summary="分析姓名")
def analyze_name(request: NameAnalyzeRequest,
                 service: NamingService = Depends(get_naming_service)):
    """分析完整姓名：五格数理、音韵、字义，提供生辰时附带八字契合度"""
    try:
        result = service.analyze_name(request.full_name, request.birth_date, request.birth_hour)
    except NamingError as e:
        return _domain_error(e)
    return APIResponse.ok(data=result)


@router.get("/naming/cache/stats", response_model=APIResponse, summary="计算缓存统计")
def cache_stats(service: NamingService = Depends(get_naming_service)):
    return APIResponse.ok(data=service.cache_stats())
