"""Logging setup for the admin API and its client."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from localstyle.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "localstyle"


def _rotating_handler(path: Path, level: int, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure the ``localstyle`` logger tree.

    Everything at ``log_level`` and above goes to stdout. With a ``log_dir``,
    ``admin.log`` also receives debug output and ``errors.log`` receives
    errors only, both rotated by size. Calling this again is a no-op.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating files; console only when None
        max_bytes: Size at which a log file is rotated
        backup_count: Rotated files kept per log

    Returns:
        The ``localstyle`` logger
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(min(level, logging.DEBUG) if log_dir else level)
    if logger.handlers:
        return logger

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating_handler(directory / "admin.log", logging.DEBUG, max_bytes, backup_count))
        logger.addHandler(_rotating_handler(directory / "errors.log", logging.ERROR, max_bytes, backup_count))

    return logger


def configure_from_settings() -> logging.Logger:
    return setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count
    )


def get_logger(name: str) -> logging.Logger:
    """Child logger under ``localstyle``, e.g. ``get_logger("staff")``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
