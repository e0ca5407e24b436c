"""
Error handlers.

Each handler declares which failures it recognizes and converts them
into a JSON response carrying the standard error envelope.
Handlers are chained by the ErrorHandlerRegistry; specific handlers
must come before the catch-all DefaultErrorHandler.
No stack traces or internal details are exposed to clients.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, cast

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from app.shared.envelope import dump_envelope, error_response
from app.shared.errors.base import AppError, ErrorCode

HTTP_400 = 400
HTTP_429 = 429
HTTP_500 = 500

MASKED_MESSAGE = "An unexpected error occurred"

_LOCATION_MESSAGES = {
    "body": "Validation failed",
    "query": "Invalid query parameters",
    "path": "Invalid path parameters",
}

_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.CONFLICT,
    429: ErrorCode.RATE_LIMITED,
}


def _error_json(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: Optional[Any] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a JSON response with the error envelope."""
    envelope = error_response(code.value, message, details)
    return JSONResponse(
        status_code=status_code, content=dump_envelope(envelope), headers=headers
    )


class ErrorHandler(ABC):
    """A single link of the handler chain.

    Attributes:
        catch_all: True when ``can_handle`` accepts every failure.
            Only the last handler of a chain may set it.
    """

    catch_all: bool = False

    @abstractmethod
    def can_handle(self, error: BaseException) -> bool:
        """Return True if this handler recognizes the failure."""
        raise NotImplementedError

    @abstractmethod
    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        """Convert the failure into an HTTP response."""
        raise NotImplementedError


class AppErrorHandler(ErrorHandler):
    """Handles every typed AppError using its own code and status."""

    def can_handle(self, error: BaseException) -> bool:
        return isinstance(error, AppError)

    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        app_error = cast(AppError, error)
        return _error_json(
            app_error.status_code, app_error.code, app_error.message, app_error.details
        )


class RequestValidationErrorHandler(ErrorHandler):
    """Handles schema-validation failures from the input-parsing boundary.

    Both FastAPI's RequestValidationError and a raw pydantic
    ValidationError map to VALIDATION_ERROR with a per-field breakdown.
    """

    def can_handle(self, error: BaseException) -> bool:
        return isinstance(error, (RequestValidationError, PydanticValidationError))

    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        issues = list(error.errors())  # type: ignore[attr-defined]
        if isinstance(error, RequestValidationError):
            message, details = self._describe_request_issues(issues)
        else:
            message = "Invalid request data"
            details = [
                {"field": ".".join(str(part) for part in issue["loc"]), "message": issue["msg"]}
                for issue in issues
            ]
        return _error_json(HTTP_400, ErrorCode.VALIDATION_ERROR, message, details)

    @staticmethod
    def _describe_request_issues(issues: list[dict[str, Any]]) -> tuple[str, list[dict[str, str]]]:
        """Return the envelope message and field details for request issues.

        The message names the location of the first issue. A body that
        is not valid JSON gets its own message.
        """
        details = []
        for issue in issues:
            loc = [str(part) for part in issue.get("loc", ())]
            field = ".".join(loc[1:]) if len(loc) > 1 else (loc[0] if loc else "")
            details.append({"field": field, "message": issue.get("msg", "")})

        if any(issue.get("type") == "json_invalid" for issue in issues):
            return "Invalid JSON body", details

        first_location = str(issues[0]["loc"][0]) if issues and issues[0].get("loc") else ""
        return _LOCATION_MESSAGES.get(first_location, "Invalid request data"), details


class RateLimitErrorHandler(ErrorHandler):
    """Handles slowapi rate-limit rejections."""

    def can_handle(self, error: BaseException) -> bool:
        return isinstance(error, RateLimitExceeded)

    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        rejection = cast(RateLimitExceeded, error)
        return _error_json(
            HTTP_429,
            ErrorCode.RATE_LIMITED,
            f"Rate limit exceeded: {rejection.detail}",
        )


class HTTPErrorHandler(ErrorHandler):
    """Handles transport-level HTTP errors (unknown route, wrong method)."""

    def can_handle(self, error: BaseException) -> bool:
        return isinstance(error, StarletteHTTPException)

    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        http_error = cast(StarletteHTTPException, error)
        status_code = http_error.status_code
        code = _STATUS_CODES.get(status_code)
        if code is None:
            code = ErrorCode.INTERNAL_ERROR if status_code >= HTTP_500 else ErrorCode.VALIDATION_ERROR
        return _error_json(
            status_code,
            code,
            str(http_error.detail),
            headers=http_error.headers,
        )


class DefaultErrorHandler(ErrorHandler):
    """Fallback for every unrecognized failure. Must be registered last.

    In production the message is masked; otherwise the failure's own
    message is surfaced to ease debugging.
    """

    catch_all = True

    def __init__(self, mask_messages: bool = False) -> None:
        self._mask_messages = mask_messages

    def can_handle(self, error: BaseException) -> bool:
        return True

    def handle(self, error: BaseException, request: Request) -> JSONResponse:
        if self._mask_messages:
            message = MASKED_MESSAGE
        else:
            message = str(error) or "Unknown error"
        return _error_json(HTTP_500, ErrorCode.INTERNAL_ERROR, message)
