from datetime import datetime
from typing import Optional
from uuid import UUID

from app.models.user import Role
from app.schemas.base import CamelModel


class UserRegister(CamelModel):
    username: str = ""
    email: str = ""
    password: str = ""


class UserLogin(CamelModel):
    email: str = ""
    password: str = ""


class UserOut(CamelModel):
    """Public user projection, never carries the password hash"""
    id: UUID
    username: str
    email: str
    role: Role
    created_at: Optional[datetime] = None
