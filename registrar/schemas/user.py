# registrar/schemas/user.py
from __future__ import annotations
from datetime import datetime
from typing import Literal, Optional
from pydantic import EmailStr, Field, field_validator
from registrar.schemas.base import APIModel

RoleName = Literal["student", "faculty", "admin"]

class UserBase(APIModel):
    username: str = Field(min_length=3, max_length=80)
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(min_length=1, max_length=80)

    @field_validator("username", "email", mode="before")
    @classmethod
    def _normalize(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=128)
    role: RoleName = "student"

class UserOut(APIModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    created_at: Optional[datetime] = None

    @field_validator("role", mode="before")
    @classmethod
    def _role_name(cls, v):
        return getattr(v, "value", v)

class LoginIn(APIModel):
    username: str
    password: str

class Token(APIModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
