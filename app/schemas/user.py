from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from app.models.user import UserRole
from app.schemas.base import CamelModel


class UserSummary(CamelModel):
    name: str
    email: EmailStr


class UserContact(CamelModel):
    id: int
    email: EmailStr
    name: str
    phone: str | None = None


class UserResponse(CamelModel):
    id: int
    email: EmailStr
    name: str
    role: UserRole
    phone: str | None = None
    created_at: datetime


class AuthUser(CamelModel):
    id: int
    email: EmailStr
    name: str
    role: UserRole


class AuthResponse(CamelModel):
    user: AuthUser
    token: str


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1)
    phone: str | None = Field(None, min_length=10, max_length=15)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required.")
        return v.strip()


class UserCreate(RegisterRequest):
    """Admin-side user creation, only profile-bearing roles."""
    role: UserRole

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: UserRole) -> UserRole:
        if v not in (UserRole.TRAINER, UserRole.TRAINEE):
            raise ValueError("Role must be TRAINER or TRAINEE.")
        return v
