# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施：错误 / 日志 / trace / 中间件

约定：
- 路由层只做参数装配，业务错误一律抛 AppError，由全局 handler 转成统一错误体
- 统一错误体：{"code", "message", "trace_id", "detail"?}
- 未匹配的路由走 not_found_handler，同样返回统一错误体
"""

from __future__ import annotations
