"""
Pydantic schemas for authentication and the role catalogue.
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from localstyle.core.roles import Permission, StaffRole
from localstyle.models.base import Base
from localstyle.models.user import AuthUser


class TokenData(BaseModel):
    """Schema for JWT token payload."""
    sub: str  # user_id
    type: str  # "access" or "refresh"
    exp: Optional[int] = None


class AuthTokens(Base):
    """Access/refresh token pair."""
    access_token: str
    refresh_token: str


class TokenRefresh(Base):
    """Schema for token refresh request."""
    refresh_token: str


class LoginRequest(Base):
    """Schema for login request. Any non-blank credentials are accepted."""
    username: str = Field(..., max_length=100)
    password: str = Field(..., max_length=256)

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Username and password are required")
        return value


class AuthResponse(Base):
    """Schema for login response."""
    user: AuthUser
    tokens: AuthTokens


class TokenResponse(Base):
    tokens: AuthTokens


class RoleInfo(Base):
    """One entry of the role catalogue."""
    role: StaffRole
    rank: int
    display_name: str
    permissions: list[Permission]
    assignable_roles: list[StaffRole]
