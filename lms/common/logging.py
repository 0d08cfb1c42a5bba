# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging

from lms.common.trace import get_trace_id

LOG_FORMAT = "[%(asctime)s - %(levelname)s - trace=%(trace_id)s - %(name)s - %(message)s]"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.trace_id = get_trace_id()
        return True


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(str(level).strip().upper(), logging.INFO)


def setup_logging(level: int | str = logging.INFO) -> None:
    """初始化全局日志（可重复调用，只挂一次 handler / filter）"""

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)

    for h in root.handlers:
        if not any(isinstance(f, TraceIdFilter) for f in h.filters):
            h.addFilter(TraceIdFilter())
