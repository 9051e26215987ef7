# core/logging.py
import sys

from loguru import logger

from core.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Route loguru output to stderr at ``level`` (defaults to
    ``Settings.LOG_LEVEL``).  Safe to call more than once – previously
    installed sinks are dropped first.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or get_settings().LOG_LEVEL).upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} – {message}",
    )
