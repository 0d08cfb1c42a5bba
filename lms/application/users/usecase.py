# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.common.errors import BadRequestError, ConflictError, NotFoundError
from lms.domain import models, schemas
from lms.infra.applogger import applogger


class UserUsecase:
    """用户域（列表 / 详情 / 增删改）"""

    def list_users(
        self,
        db: Session,
        *,
        limit: int = 20,
        offset: int = 0,
        role: Optional[str] = None,
        is_active: Optional[bool] = None,
        q: Optional[str] = None,
    ) -> Tuple[List[models.User], int]:
        conds = []
        if role is not None:
            conds.append(models.User.role == role)
        if is_active is not None:
            conds.append(models.User.is_active == is_active)
        if q and q.strip():
            # 子串匹配：% _ 按字面处理；email 入库已是小写
            needle = q.strip().lower()
            conds.append(
                or_(
                    func.lower(models.User.name).contains(needle, autoescape=True),
                    models.User.email.contains(needle, autoescape=True),
                )
            )

        total_stmt = select(func.count()).select_from(models.User).where(*conds)
        total = int(db.scalar(total_stmt) or 0)

        stmt = (
            select(models.User)
            .where(*conds)
            .order_by(models.User.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return list(db.scalars(stmt).all()), total

    def get_user(self, db: Session, *, user_id: int) -> models.User:
        user = db.get(models.User, user_id)
        if user is None:
            raise NotFoundError(code="USER_NOT_FOUND", message="user not found", detail={"user_id": user_id})
        return user

    def create_user(self, db: Session, *, req: schemas.UserCreateRequest) -> models.User:
        email = str(req.email).lower()
        self._ensure_email_free(db, email)

        user = models.User(
            name=req.name,
            email=email,
            role=req.role,
            is_active=req.is_active,
        )
        db.add(user)
        self._commit(db)
        db.refresh(user)

        applogger.info("[USER] created: id=%s role=%s", user.id, user.role)
        return user

    def update_user(self, db: Session, *, user_id: int, req: schemas.UserUpdateRequest) -> models.User:
        user = self.get_user(db, user_id=user_id)

        changes = req.model_dump(exclude_unset=True)
        # 显式传 null 的字段视为未修改（库里这些列都不允许为空）
        changes = {k: v for k, v in changes.items() if v is not None}
        if not changes:
            raise BadRequestError(code="EMPTY_UPDATE", message="no fields to update")

        if "email" in changes:
            changes["email"] = str(changes["email"]).lower()
            if changes["email"] != user.email:
                self._ensure_email_free(db, changes["email"], exclude_id=user.id)

        for field, value in changes.items():
            setattr(user, field, value)

        self._commit(db)
        db.refresh(user)

        applogger.info("[USER] updated: id=%s fields=%s", user.id, ",".join(sorted(changes)))
        return user

    def delete_user(self, db: Session, *, user_id: int) -> None:
        user = self.get_user(db, user_id=user_id)
        db.delete(user)
        db.commit()

        applogger.info("[USER] deleted: id=%s", user_id)

    def _ensure_email_free(self, db: Session, email: str, exclude_id: Optional[int] = None) -> None:
        stmt = select(models.User.id).where(models.User.email == email)
        if exclude_id is not None:
            stmt = stmt.where(models.User.id != exclude_id)
        if db.scalar(stmt) is not None:
            raise ConflictError(code="EMAIL_ALREADY_EXISTS", message="email already exists", detail={"email": email})

    def _commit(self, db: Session) -> None:
        # 并发下唯一索引兜底
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(code="EMAIL_ALREADY_EXISTS", message="email already exists") from e
