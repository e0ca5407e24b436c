"""
Error handler registry.

Holds the ordered handler chain and dispatches each failure to the
first handler that accepts it. The chain is validated once, at
construction: it must end with exactly one catch-all handler.
"""

import logging
from typing import Iterable, Optional

from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import ErrorHandler
from app.shared.errors.logger import ErrorLogger

logger = logging.getLogger(__name__)


class RegistryConfigurationError(ValueError):
    """Raised when a handler chain cannot guarantee a response."""


class NoErrorHandlerFound(RuntimeError):
    """Raised when no handler accepts a failure.

    Unreachable with a validated chain; it signals a handler whose
    ``catch_all`` flag lies about ``can_handle``.
    """


class ErrorHandlerRegistry:
    """Ordered first-match chain of error handlers.

    Handlers are tried in registration order and the first one whose
    ``can_handle`` returns True produces the response. Later handlers
    are never consulted, even if they would also match.
    """

    def __init__(self, handlers: Iterable[ErrorHandler], error_logger: ErrorLogger) -> None:
        self._handlers = tuple(handlers)
        self._error_logger = error_logger
        self._validate_chain(self._handlers)

    @property
    def handlers(self) -> tuple[ErrorHandler, ...]:
        """The handler chain, in dispatch order."""
        return self._handlers

    @staticmethod
    def _validate_chain(handlers: tuple[ErrorHandler, ...]) -> None:
        if not handlers:
            raise RegistryConfigurationError("Error handler chain is empty")

        last = handlers[-1]
        if not last.catch_all:
            raise RegistryConfigurationError(
                f"Last error handler must be a catch-all, got {type(last).__name__}"
            )

        for handler in handlers[:-1]:
            if handler.catch_all:
                raise RegistryConfigurationError(
                    f"Catch-all handler {type(handler).__name__} shadows the handlers after it"
                )

    def _select(self, error: BaseException) -> Optional[ErrorHandler]:
        for handler in self._handlers:
            if handler.can_handle(error):
                return handler
        return None

    def dispatch(self, error: BaseException, request: Request) -> Response:
        """Log the failure, then convert it with the first matching handler.

        The log context carries ``unexpected=True`` when the failure falls
        through to the catch-all (or to no handler at all).

        Args:
            error: The failure raised while serving the request.
            request: The request being served.

        Returns:
            The HTTP response produced by the matching handler.

        Raises:
            NoErrorHandlerFound: If no handler accepts the failure.
        """
        handler = self._select(error)
        self._error_logger.log(
            error,
            {
                "path": request.url.path,
                "method": request.method,
                "unexpected": handler is None or handler.catch_all,
            },
        )

        if handler is None:
            logger.critical("No error handler accepted %s", type(error).__name__)
            raise NoErrorHandlerFound(f"No error handler found for {type(error).__name__}")
        return handler.handle(error, request)
