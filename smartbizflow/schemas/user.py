"""
User schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from smartbizflow.models import Role
from smartbizflow.schemas.base import CamelModel, RecordOut, normalize_email


class UserCreate(CamelModel):
    """Schema for creating a user"""
    email: str = Field(..., min_length=3, description="Login email (unique)")
    password: str = Field(..., min_length=6, max_length=72, description="Plaintext password, hashed before storage")
    role: Role = Field(default=Role.EMPLOYEE, description="User role")
    is_active: bool = Field(default=True, description="Whether the account may log in")

    @field_validator("email")
    @classmethod
    def clean_email(cls, v: str) -> str:
        return normalize_email(v)


class UserOut(RecordOut):
    """User output; the password hash is never exposed"""
    email: str
    role: Role
    is_active: bool
    last_login: Optional[datetime] = None
