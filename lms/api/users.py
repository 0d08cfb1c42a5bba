# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from lms.api.deps import get_db, get_user_usecase
from lms.application.users.usecase import UserUsecase
from lms.domain import schemas
from lms.infra.config import settings


router = APIRouter(prefix=f"{settings.API_PREFIX}/users", tags=["users"])


@router.get("", response_model=schemas.UserListResponse)
def list_users(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    role: Optional[schemas.Role] = None,
    is_active: Optional[bool] = None,
    q: Optional[str] = Query(None, max_length=100),
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    users, total = uc.list_users(db, limit=limit, offset=offset, role=role, is_active=is_active, q=q)
    return schemas.UserListResponse(
        data=[schemas.UserOut.model_validate(u) for u in users],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    req: schemas.UserCreateRequest,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    user = uc.create_user(db, req=req)
    return schemas.UserResponse(data=schemas.UserOut.model_validate(user))


@router.get("/{user_id}", response_model=schemas.UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    user = uc.get_user(db, user_id=user_id)
    return schemas.UserResponse(data=schemas.UserOut.model_validate(user))


@router.patch("/{user_id}", response_model=schemas.UserResponse)
def update_user(
    user_id: int,
    req: schemas.UserUpdateRequest,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    user = uc.update_user(db, user_id=user_id, req=req)
    return schemas.UserResponse(data=schemas.UserOut.model_validate(user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    uc.delete_user(db, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
