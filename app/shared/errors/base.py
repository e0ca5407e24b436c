"""
Application error taxonomy.

Every failure raised deliberately by the application layer is an
AppError carrying a stable machine-readable code, a human message,
the HTTP status it maps to, and optional structured details.
Error codes are part of the public API contract and must not change.
No framework imports allowed.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Stable error codes exposed to API clients."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    # Transport-level only, never raised by services.
    RATE_LIMITED = "RATE_LIMITED"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"


class AppError(Exception):
    """Base error for all typed application failures.

    Not meant to be raised directly; use one of the subclasses.

    Attributes:
        code: Stable error code.
        message: Human-readable message.
        status_code: HTTP status equivalent.
        details: Optional structured payload (e.g. per-field failures).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int,
        details: Optional[Any] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, identifier: Optional[Any] = None) -> None:
        if identifier is not None and identifier != "":
            message = f"{resource} with id '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(ErrorCode.NOT_FOUND, message, 404)
        self.resource = resource
        self.identifier = identifier


class ValidationError(AppError):
    """Raised when input violates a business or shape rule.

    ``details`` is usually a list of ``{"field": ..., "message": ...}``.
    """

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, 400, details)


class ConflictError(AppError):
    """Raised when a write would duplicate or contradict existing state."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(ErrorCode.CONFLICT, message, 409, details)


class UnauthorizedError(AppError):
    """Raised when the caller is not authenticated."""

    def __init__(self, message: str = "Unauthorized access") -> None:
        super().__init__(ErrorCode.UNAUTHORIZED, message, 401)


class ForbiddenError(AppError):
    """Raised when the caller may not access the resource."""

    def __init__(self, message: str = "Access forbidden") -> None:
        super().__init__(ErrorCode.FORBIDDEN, message, 403)


class InternalError(AppError):
    """Raised for failures the client cannot act on."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(ErrorCode.INTERNAL_ERROR, message, 500)
