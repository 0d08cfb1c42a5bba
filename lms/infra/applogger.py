# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

import logging


"""业务日志出口

日志初始化由 lms.common.logging.setup_logging() 负责，
这里只暴露一个命名 logger，业务代码统一用它打点。
"""


applogger = logging.getLogger("lms")
