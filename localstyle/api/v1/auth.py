"""
Authentication API endpoints for the mock login flow and token management.
"""
import re
from typing import Optional
from fastapi import APIRouter, Depends, status

from localstyle.core.roles import StaffRole
from localstyle.core.security import (
    create_access_token,
    create_refresh_token,
    verify_refresh_token,
    get_current_user,
    get_optional_user
)
from localstyle.logging_config import get_logger
from localstyle.models.user import AuthUser
from localstyle.schemas.auth import (
    AuthResponse,
    AuthTokens,
    LoginRequest,
    TokenRefresh,
    TokenResponse
)
from localstyle.schemas.common import MessageResponse

logger = get_logger("auth")

router = APIRouter(prefix="/auth", tags=["Authentication"])

MOCK_USER_ID = "user_001"
MOCK_EMAIL_DOMAIN = "localstyle.com"


def mock_user_for(username: str) -> AuthUser:
    """The identity every successful mock login resolves to, named after the username."""
    username = username.strip()
    local_part = re.sub(r"[^A-Za-z0-9._+-]", "", username) or "user"
    return AuthUser(
        id=MOCK_USER_ID,
        email=f"{local_part}@{MOCK_EMAIL_DOMAIN}",
        name=username[:1].upper() + username[1:],
        role=StaffRole.BRAND_OWNER,
    )


def issue_tokens(user: AuthUser) -> AuthTokens:
    return AuthTokens(
        access_token=create_access_token(user),
        refresh_token=create_refresh_token(user)
    )


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest):
    """
    Login with any non-blank username and password.

    - **username**: Becomes the user's email local part and display name
    - **password**: Not verified

    Returns the user and a signed access/refresh token pair.
    """
    user = mock_user_for(credentials.username)
    logger.info(f"Mock login for {user.email}")
    return AuthResponse(user=user, tokens=issue_tokens(user))


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(token_data: TokenRefresh):
    """
    Refresh access token using refresh token.

    - **refreshToken**: Valid refresh token

    Returns new access token and refresh token.
    """
    user = verify_refresh_token(token_data.refresh_token)
    return TokenResponse(tokens=issue_tokens(user))


@router.get("/me", response_model=AuthUser)
async def get_current_user_info(current_user: AuthUser = Depends(get_current_user)):
    """
    Get the current authenticated user.

    Requires valid access token in Authorization header.
    """
    return current_user


@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def logout(current_user: Optional[AuthUser] = Depends(get_optional_user)):
    """
    Logout current user.

    Note: Client should discard its tokens. There is no server-side session to end.
    """
    if current_user:
        logger.info(f"Logout for {current_user.email}")
    return MessageResponse(message="Logged out successfully")
