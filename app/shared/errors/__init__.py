"""
Shared error handling package.

Centralizes the error taxonomy and the error-to-HTTP mapping so that
failures are consistently translated into API responses.
"""

from app.shared.errors.base import (
    AppError,
    ConflictError,
    ErrorCode,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AppError",
    "ConflictError",
    "ErrorCode",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
