"""
FastAPI main application for the LocalStyle brand admin API.

To run: uvicorn localstyle.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from localstyle.api.v1 import api_router
from localstyle.core.config import settings
from localstyle.error_handlers import (
    AppException,
    app_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from localstyle.logging_config import configure_from_settings, get_logger
from localstyle.middleware import RequestLoggingMiddleware, build_limiter, rate_limit_exceeded_handler
from localstyle.repositories import Collections
from localstyle.schemas.common import HealthCheck
from localstyle.seed import build_collections
from localstyle.services.notifications import EmailNotifier

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    configure_from_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(
        f"Collections ready: {app.state.collections.products.count()} products, "
        f"{app.state.collections.categories.count()} categories, "
        f"{app.state.collections.staff.count()} staff"
    )

    yield

    logger.info("Shutting down application")


def create_app(
    collections: Optional[Collections] = None,
    notifier: Optional[EmailNotifier] = None
) -> FastAPI:
    """
    Build the application around a set of collection stores.

    Without explicit stores the demo fixtures are loaded when SEED_DEMO_DATA is set.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="LocalStyle brand admin - catalog, categories, staff and invites",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    app.state.collections = collections if collections is not None else build_collections(settings.seed_demo_data)
    app.state.notifier = notifier or EmailNotifier()
    app.state.limiter = build_limiter(settings.rate_limit_per_minute, enabled=settings.rate_limit_enabled)

    # Middleware
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(api_router)

    @app.get("/health", response_model=HealthCheck)
    async def health_check():
        """Simple health check endpoint."""
        return HealthCheck(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=settings.app_version
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "localstyle.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
