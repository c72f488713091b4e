"""
Application exceptions and the handlers that render them.

Every error leaves the API in the same envelope::

    {"error": "<message>", "details": {...}, "path": "/api/v1/..."}

Services return these exceptions inside ``Err``; the API client raises the
same types when it decodes an error response.
"""
from typing import Optional, Union
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from localstyle.logging_config import get_logger

logger = get_logger("errors")


class AppException(Exception):
    """Base exception carrying an HTTP status and structured details."""

    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(AppException):
    def __init__(self, resource: str, identifier: Union[int, str]):
        super().__init__(
            message=f"{resource} '{identifier}' not found",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)}
        )


class ConflictError(AppException):
    """
    The request clashes with current state.

    ``reason`` is a stable machine-readable code (``duplicate_slug``,
    ``has_children``, ``staff_active``, ``invite_pending`` ...) repeated in
    ``details`` so clients can branch on it.
    """

    def __init__(self, message: str, reason: str, details: dict = None):
        super().__init__(message=message, status_code=409, details={"reason": reason, **(details or {})})
        self.reason = reason


class InviteExpiredError(ConflictError):
    """Answering an invite after its expiry. Rendered as 410 Gone."""

    def __init__(self, invite_id: str, expires_at: str):
        super().__init__(
            message="Invite has expired",
            reason="invite_expired",
            details={"invite_id": invite_id, "expires_at": expires_at}
        )
        self.status_code = status.HTTP_410_GONE


class PermissionDeniedError(AppException):
    """The acting role does not outrank the role it tried to assign or change."""

    def __init__(self, actor_role: str, target_role: str):
        super().__init__(
            message=f"Role '{actor_role}' cannot manage role '{target_role}'",
            status_code=403,
            details={"actor_role": actor_role, "target_role": target_role}
        )


class ValidationError(AppException):
    def __init__(self, message: str, errors: list = None):
        super().__init__(message=message, status_code=422, details={"validation_errors": errors or []})


class TransientError(AppException):
    """Client side: the API timed out, was unreachable or answered 5xx."""

    def __init__(self, message: str, original_error: str = None):
        super().__init__(message=message, status_code=503, details={"original_error": original_error})


class SessionExpiredError(AppException):
    """Client side: the stored credentials were rejected and have been cleared."""

    def __init__(self, message: str = "Session expired. Please login again."):
        super().__init__(message=message, status_code=401)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    details: Optional[dict] = None,
    headers: Optional[dict] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "details": details or {}, "path": request.url.path},
        headers=headers
    )


async def app_exception_handler(request: Request, exc: AppException):
    # 4xx are expected outcomes of business rules
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}",
        extra={"status_code": exc.status_code, "details": exc.details}
    )
    return error_response(request, exc.status_code, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Flatten pydantic errors into ``{field, message, type}`` entries."""
    errors = [
        {
            "field": " -> ".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {len(errors)} error(s)")
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation failed",
        {"validation_errors": errors}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return error_response(request, exc.status_code, message, headers=getattr(exc, "headers", None))


async def generic_exception_handler(request: Request, exc: Exception):
    logger.critical(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}",
        exc_info=exc
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        {"message": "An unexpected error occurred. Please contact support if the issue persists."}
    )
