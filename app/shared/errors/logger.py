"""
Error logging services.

The registry records every failure before dispatching it. The sink is
swappable so an external tracker can replace plain logging.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class ErrorLogger(ABC):
    """Port for recording failures with request context."""

    @abstractmethod
    def log(self, error: BaseException, context: Optional[Mapping[str, Any]] = None) -> None:
        """Record a failure.

        Args:
            error: The failure being dispatched.
            context: Request context (path, method, unexpected).
        """
        raise NotImplementedError


class LoggingErrorLogger(ErrorLogger):
    """Writes failures to the standard logging system.

    Only failures marked ``unexpected`` in the context (those left to
    the catch-all handler) are logged with a traceback. In quiet mode
    nothing is written, which keeps test output clean.
    """

    def __init__(self, quiet: bool = False) -> None:
        self._quiet = quiet

    def log(self, error: BaseException, context: Optional[Mapping[str, Any]] = None) -> None:
        if self._quiet:
            return

        context = context or {}
        logger.error(
            "[Error] %s %s -> %s: %s",
            context.get("method", "-"),
            context.get("path", "-"),
            type(error).__name__,
            error,
            exc_info=error if context.get("unexpected") else None,
        )
