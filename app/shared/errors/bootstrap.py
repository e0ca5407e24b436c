"""
Error handling bootstrap.

Builds the handler chain and installs it on the FastAPI application so
that every failure, wherever it is raised, is caught exactly once and
answered with the standard error envelope.

Order matters: specific handlers first, the catch-all last.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.config import Settings
from app.shared.errors.base import AppError
from app.shared.errors.handlers import (
    AppErrorHandler,
    DefaultErrorHandler,
    HTTPErrorHandler,
    RateLimitErrorHandler,
    RequestValidationErrorHandler,
)
from app.shared.errors.logger import ErrorLogger, LoggingErrorLogger
from app.shared.errors.registry import ErrorHandlerRegistry


def build_error_registry(
    settings: Settings, error_logger: ErrorLogger | None = None
) -> ErrorHandlerRegistry:
    """Create the registry with the default handler chain.

    Args:
        settings: Application settings; the environment decides message
            masking and quiet logging.
        error_logger: Optional replacement for the logging sink.

    Returns:
        A validated ErrorHandlerRegistry.
    """
    if error_logger is None:
        error_logger = LoggingErrorLogger(quiet=settings.is_test)

    return ErrorHandlerRegistry(
        handlers=[
            AppErrorHandler(),
            RequestValidationErrorHandler(),
            RateLimitErrorHandler(),
            HTTPErrorHandler(),
            DefaultErrorHandler(mask_messages=settings.is_production),
        ],
        error_logger=error_logger,
    )


class ErrorDispatchMiddleware(BaseHTTPMiddleware):
    """Answers failures that escape the routed application.

    Installed innermost, so the response still passes through the outer
    middleware (security headers, request logging).
    """

    def __init__(self, app: ASGIApp, registry: ErrorHandlerRegistry) -> None:
        super().__init__(app)
        self._registry = registry

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._registry.dispatch(exc, request)


def setup_error_handling(app: FastAPI, registry: ErrorHandlerRegistry) -> None:
    """Route every failure type FastAPI can surface through the registry.

    Must be called before any other middleware is added, so that the
    dispatch middleware sits innermost.

    Args:
        app: The FastAPI application instance.
        registry: The handler chain to dispatch to.
    """
    app.state.error_registry = registry

    async def dispatch(request: Request, exc: Exception) -> Response:
        return registry.dispatch(exc, request)

    # Typed failures are answered by Starlette's exception middleware;
    # anything else is caught by ErrorDispatchMiddleware. The Exception
    # entry covers failures raised by the outer middleware itself.
    app.add_exception_handler(AppError, dispatch)
    app.add_exception_handler(PydanticValidationError, dispatch)
    app.add_exception_handler(RequestValidationError, dispatch)
    app.add_exception_handler(RateLimitExceeded, dispatch)
    app.add_exception_handler(StarletteHTTPException, dispatch)
    app.add_exception_handler(Exception, dispatch)
    app.add_middleware(ErrorDispatchMiddleware, registry=registry)
