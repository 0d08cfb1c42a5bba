# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from lms.application.users.usecase import UserUsecase
from lms.infra.db import get_db  # noqa: F401

_user_uc_singleton = UserUsecase()


def get_user_usecase() -> UserUsecase:
    return _user_uc_singleton
