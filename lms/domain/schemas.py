# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: 用户接口的请求 / 响应模型

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

Role = Literal["student", "instructor", "admin"]


# ---------- 请求 ----------

class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    role: Role = "student"
    is_active: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, v):
        # 邮箱大小写不敏感，入库前统一小写
        return v.strip().lower() if isinstance(v, str) else v


class UserUpdateRequest(BaseModel):
    """PATCH：只更新显式传入的字段"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[Role] = None
    is_active: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, v):
        # 邮箱大小写不敏感，入库前统一小写
        return v.strip().lower() if isinstance(v, str) else v


# ---------- 响应 ----------

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    is_active: bool
    created_at: int
    updated_at: Optional[int] = None


class UserResponse(BaseModel):
    data: UserOut


class UserListResponse(BaseModel):
    data: List[UserOut]
    total: int
    limit: int
    offset: int
