# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from lms.api import users as users_api
from lms.common.errors import AppError
from lms.common.exception_handlers import (
    app_error_handler,
    not_found_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from lms.common.logging import setup_logging
from lms.common.middlewares import TraceIdMiddleware
from lms.common.trace import TRACE_HEADER_OUT
from lms.infra.config import settings

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="lms-api",
    version="1.0.0",
)


# ---------- middlewares / handlers ----------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[TRACE_HEADER_OUT],
)
app.add_middleware(TraceIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StarletteHTTPException, not_found_handler)
app.add_exception_handler(Exception, unhandled_error_handler)


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


# 用户
app.include_router(users_api.router)
