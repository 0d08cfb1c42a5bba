# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: 本地快速建表（正式环境用 `alembic upgrade head`）

from __future__ import annotations

from lms.common.logging import setup_logging
from lms.domain import models  # noqa: F401
from lms.infra.applogger import applogger
from lms.infra.config import settings
from lms.infra.db import Base, engine


def init_db() -> None:
    applogger.info("Creating tables on %s ...", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    applogger.info("Done.")


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    init_db()
