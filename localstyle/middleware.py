"""Rate limiting and per-request access logging."""

import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from localstyle.error_handlers import error_response
from localstyle.logging_config import get_logger

logger = get_logger("access")

REQUEST_ID_HEADER = "X-Request-ID"
RETRY_AFTER_SECONDS = 60


def build_limiter(per_minute: int, enabled: bool = True) -> Limiter:
    """Per-client limiter. Each app builds its own so counters are never shared."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[f"{per_minute}/minute"],
        enabled=enabled
    )


def client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log one line per request and response.

    The id is taken from an incoming ``X-Request-ID`` header when present,
    echoed back on the response and kept on ``request.state.request_id``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        started = time.perf_counter()

        logger.info(f"[{request_id}] {request.method} {request.url.path} from {client_host(request)}")

        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            logger.exception(f"[{request_id}] {request.method} {request.url.path} failed after {elapsed:.2f}ms")
            raise

        elapsed = (time.perf_counter() - started) * 1000
        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"[{request_id}] {response.status_code} {request.method} {request.url.path} in {elapsed:.2f}ms")

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.2f}ms"
        return response


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """429 in the standard error envelope, with a Retry-After hint."""
    logger.warning(f"Rate limit hit by {client_host(request)} on {request.url.path}: {exc.detail}")
    return error_response(
        request,
        429,
        "Too many requests",
        {"limit": str(exc.detail), "retry_after": RETRY_AFTER_SECONDS},
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)}
    )
