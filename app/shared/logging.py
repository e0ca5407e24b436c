"""
Logging configuration for the application.

One stdout handler on the root logger, configured from Settings.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING or above whatever the app level is.
# Request lines come from RequestLoggingMiddleware, SQL is never echoed.
THIRD_PARTY_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine")


def resolve_level(settings: Settings) -> int:
    """Return the root level for the given settings.

    Test mode is capped at WARNING so start-up and request lines stay
    out of test output. Unknown level names fall back to INFO.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if settings.is_test:
        level = max(level, logging.WARNING)
    return level


def configure_logging(settings: Settings) -> None:
    """Configure application logging from settings.

    Args:
        settings: Application settings (log level and environment).
    """
    level = resolve_level(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
