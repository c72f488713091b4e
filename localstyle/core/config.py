"""
Settings for the admin API and client, read from the environment or a .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        populate_by_name=True
    )

    # Application
    app_name: str = Field(default="LocalStyle Brand Admin", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")

    # JWT Authentication (mock login, tokens are still signed)
    jwt_secret_key: str = Field(
        default="your-secret-key-change-this-in-production",
        alias="JWT_SECRET_KEY"
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_access_token_expire_minutes: int = Field(default=60, alias="JWT_ACCESS_TOKEN_EXPIRE_MINUTES")
    jwt_refresh_token_expire_days: int = Field(default=14, alias="JWT_REFRESH_TOKEN_EXPIRE_DAYS")

    # Security
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        alias="CORS_ORIGINS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="./logs", alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    # Rate Limiting
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    rate_limit_per_minute: int = Field(default=100, alias="RATE_LIMIT_PER_MINUTE")

    # Mock collections
    seed_demo_data: bool = Field(default=True, alias="SEED_DEMO_DATA")
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    # Staff rules
    invite_expiry_days: int = Field(default=7, alias="INVITE_EXPIRY_DAYS")
    recent_hire_days: int = Field(default=30, alias="RECENT_HIRE_DAYS")

    # Email (logged only, never delivered)
    email_enabled: bool = Field(default=False, alias="EMAIL_ENABLED")
    email_from: str = Field(default="noreply@localstyle.com", alias="EMAIL_FROM")
    email_from_name: str = Field(default="LocalStyle", alias="EMAIL_FROM_NAME")

    # API client
    api_base_url: str = Field(default="http://localhost:8000/api/v1", alias="API_BASE_URL")
    client_timeout_seconds: float = Field(default=10.0, alias="CLIENT_TIMEOUT_SECONDS")
    client_max_retries: int = Field(default=3, alias="CLIENT_MAX_RETRIES")
    client_backoff_factor: float = Field(default=0.5, alias="CLIENT_BACKOFF_FACTOR")
    cache_stale_seconds: int = Field(default=300, alias="CACHE_STALE_SECONDS")  # 5 minutes
    session_file: Optional[str] = Field(default=None, alias="SESSION_FILE")


# Global settings instance
settings = Settings()
