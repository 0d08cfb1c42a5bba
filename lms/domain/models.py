# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import time
from typing import Optional

from sqlalchemy import BigInteger, Boolean, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from lms.infra.db import Base

ROLE_STUDENT = "student"
ROLE_INSTRUCTOR = "instructor"
ROLE_ADMIN = "admin"

ROLES = (ROLE_STUDENT, ROLE_INSTRUCTOR, ROLE_ADMIN)
ROLE_CHECK_SQL = "role IN (" + ", ".join(f"'{r}'" for r in ROLES) + ")"


def _ts() -> int:
    return int(time.time())


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(ROLE_CHECK_SQL, name="ck_users_role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        doc="统一小写存储",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ROLE_STUDENT,
        doc="student / instructor / admin",
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts)
    updated_at: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        default=None,
        onupdate=_ts,
    )
