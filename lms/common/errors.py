# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    """业务异常基类，status_code 决定 HTTP 状态码"""
    code: str
    message: str
    status_code: int = 400
    detail: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class BadRequestError(AppError):
    def __init__(self, code: str = "BAD_REQUEST", message: str = "bad request", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=400, detail=detail)


class NotFoundError(AppError):
    def __init__(self, code: str = "NOT_FOUND", message: str = "not found", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=404, detail=detail)


class ConflictError(AppError):
    def __init__(self, code: str = "CONFLICT", message: str = "resource conflict", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=409, detail=detail)
