# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from lms.infra.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy ORM 基类"""


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_conn, connection_record) -> None:  # noqa: ARG001
    # sqlite 内置 lower() 只处理 ASCII，替换成与 Python str.lower 一致的实现
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, **kwargs: Any) -> Engine:
    """按 URL 创建 engine；sqlite 需要放开跨线程（FastAPI 同步路由跑在线程池里）"""
    connect_args: Dict[str, Any] = kwargs.pop("connect_args", {})
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args.setdefault("check_same_thread", False)
    eng = create_engine(
        url,
        pool_pre_ping=True,
        echo=False,
        connect_args=connect_args,
        **kwargs,
    )
    if is_sqlite:
        event.listen(eng, "connect", _register_sqlite_functions)
    return eng


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def get_db() -> Generator[Session, None, None]:
    """FastAPI 依赖：yield 一个 Session，请求结束自动关闭"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()