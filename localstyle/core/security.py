"""
Security utilities for the mock authentication flow.
Handles JWT tokens and resolving the current user from a bearer token.

Login accepts any non-blank credentials, but the issued tokens are real signed
JWTs carrying the user's claims, so ``/auth/me`` and the role checks on staff
operations work without a user store.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Any

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError as PydanticValidationError

from localstyle.core.config import settings
from localstyle.models.user import AuthUser


# HTTP Bearer token scheme; missing credentials are answered with 401 below
security_scheme = HTTPBearer(auto_error=False)

USER_CLAIMS = ("email", "name", "role")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _issue_token(user: AuthUser, token_type: str, lifetime: timedelta) -> str:
    now = datetime.now(timezone.utc)
    to_encode = {
        "exp": now + lifetime,
        "iat": now,
        "sub": user.id,
        "type": token_type,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(
    user: AuthUser,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT access token.

    Args:
        user: Authenticated user; id becomes ``sub``, email/name/role are copied as claims
        expires_delta: Token expiration time

    Returns:
        Encoded JWT token string
    """
    return _issue_token(
        user,
        "access",
        expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    )


def create_refresh_token(
    user: AuthUser,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT refresh token.

    The user claims ride along so a refresh can mint a new access token
    without a user lookup.
    """
    return _issue_token(
        user,
        "refresh",
        expires_delta or timedelta(days=settings.jwt_refresh_token_expire_days)
    )


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a JWT token.

    Raises:
        HTTPException: If token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        raise _unauthorized("Could not validate credentials")


def user_from_token(token: str, expected_type: str = "access") -> AuthUser:
    """
    Rebuild the user carried by a token of the given type.

    Raises:
        HTTPException: On a bad signature, wrong token type or missing claims
    """
    payload = decode_token(token)

    if payload.get("type", "access") != expected_type:
        raise _unauthorized(f"Invalid token type. {expected_type.capitalize()} token required.")

    if payload.get("sub") is None or any(claim not in payload for claim in USER_CLAIMS):
        raise _unauthorized("Invalid authentication credentials")

    try:
        return AuthUser(
            id=payload["sub"],
            email=payload["email"],
            name=payload["name"],
            role=payload["role"],
        )
    except PydanticValidationError:
        raise _unauthorized("Invalid user claims in token")


def verify_refresh_token(token: str) -> AuthUser:
    """Verify a refresh token and return its user."""
    return user_from_token(token, expected_type="refresh")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme)
) -> AuthUser:
    """
    Get the current authenticated user from the bearer token.

    Raises:
        HTTPException: If the token is missing or invalid
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    return user_from_token(credentials.credentials)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme)
) -> Optional[AuthUser]:
    """
    Current user when a bearer token is sent, otherwise None.

    A token that is present but invalid is still rejected with 401.
    """
    if credentials is None:
        return None
    return user_from_token(credentials.credentials)
