# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: 请求级 trace_id（ContextVar，每个请求 task 独立）

from __future__ import annotations

import uuid
from contextvars import ContextVar

TRACE_HEADER_IN = "X-Request-Id"
TRACE_HEADER_OUT = "X-Trace-Id"

_EMPTY = "-"

_trace_id_var: ContextVar[str] = ContextVar("lms_trace_id", default=_EMPTY)


def new_trace_id() -> str:
    return uuid.uuid4().hex


def set_trace_id(trace_id: str | None) -> None:
    _trace_id_var.set((trace_id or "").strip() or _EMPTY)


def get_trace_id() -> str:
    return _trace_id_var.get() or _EMPTY
