from pydantic import ConfigDict, EmailStr, Field, field_validator

from models.user import UserRole
from schemas.common import CamelModel, UtcDateTime


# ---------- ثبت‌نام ----------
class UserCreate(CamelModel):
    username: str
    email: EmailStr
    password: str
    name: str
    role: UserRole

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret123",
                "name": "Alice Donor",
                "role": "DONOR",
            }
        }
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v):
        if not isinstance(v, str) or v not in {r.value for r in UserRole}:
            raise ValueError("Role must be ADMIN, DONOR, or VOLUNTEER")
        return v


# ---------- ورود ----------
class UserLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("username", "password", mode="before")
    @classmethod
    def required(cls, v, info):
        if v is None or (isinstance(v, str) and not v):
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v


# ---------- خروجی کاربر ----------
class UserRead(CamelModel):
    """A user without the password hash."""
    id: int
    username: str
    email: str
    name: str
    role: UserRole
    created_at: UtcDateTime


class UserSummary(CamelModel):
    id: int
    name: str
    email: str


class AuthResponse(CamelModel):
    user: UserRead
    token: str


class AuthenticatedIdentity(CamelModel):
    """What a verified token proves about the caller, nothing more."""
    id: int
    username: str
    role: UserRole
