# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: 全局异常处理（error handler / not-found handler）

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lms.common.errors import AppError
from lms.common.trace import TRACE_HEADER_OUT, get_trace_id

logger = logging.getLogger(__name__)


def error_payload(code: str, message: str, detail: Any = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "code": code,
        "message": message,
        "trace_id": get_trace_id(),
    }
    if detail is not None:
        data["detail"] = jsonable_encoder(detail)
    return data


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("app error %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.code, exc.message, exc.detail),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=422,
        content=error_payload(
            "VALIDATION_ERROR",
            "invalid request",
            detail=exc.errors(),
        ),
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """路由未匹配 / 框架层 HTTP 异常"""
    if exc.status_code == 404:
        content = error_payload("NOT_FOUND", f"route not found: {request.method} {request.url.path}")
    else:
        content = error_payload(f"HTTP_{exc.status_code}", str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    logger.exception("Unhandled error: %s %s", request.method, request.url.path)
    # 500 由最外层 ServerErrorMiddleware 生成，不经过 TraceIdMiddleware，这里补 header
    return JSONResponse(
        status_code=500,
        content=error_payload("INTERNAL_ERROR", "internal server error"),
        headers={TRACE_HEADER_OUT: get_trace_id()},
    )
