# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from lms.common.trace import TRACE_HEADER_IN, TRACE_HEADER_OUT, get_trace_id, new_trace_id, set_trace_id

logger = logging.getLogger(__name__)


class TraceIdMiddleware(BaseHTTPMiddleware):
    """注入 trace_id，并记录一行 access 日志"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_trace_id(request.headers.get(TRACE_HEADER_IN) or new_trace_id())
        trace_id = get_trace_id()

        started = time.perf_counter()
        response: Response = await call_next(request)
        cost_ms = (time.perf_counter() - started) * 1000

        response.headers[TRACE_HEADER_OUT] = trace_id
        logger.info("%s %s -> %s (%.1fms)", request.method, request.url.path, response.status_code, cost_ms)
        return response
