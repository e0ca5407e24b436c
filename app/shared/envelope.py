"""
Uniform response envelope.

Every endpoint answers with ``{success, data?, error?, meta?}``.
Exactly one of ``data`` / ``error`` is present depending on ``success``.
"""

from typing import Any, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiError(BaseModel):
    """Error body of a failed response."""

    code: str
    message: str
    details: Optional[Any] = None


class ApiMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int
    limit: int
    total: int
    count: int


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    success: bool
    data: Optional[T] = None
    error: Optional[ApiError] = None
    meta: Optional[ApiMeta] = None


def success_response(data: T, meta: Optional[ApiMeta] = None) -> ApiResponse[T]:
    """Wrap a payload in a successful envelope."""
    return ApiResponse(success=True, data=data, meta=meta)


def error_response(
    code: str, message: str, details: Optional[Any] = None
) -> ApiResponse[Any]:
    """Build a failed envelope. ``details`` is omitted when None."""
    return ApiResponse(
        success=False,
        error=ApiError(code=code, message=message, details=details),
    )


def paginated_response(
    items: Sequence[T], page: int, limit: int, total: int
) -> ApiResponse[list[T]]:
    """Wrap one page of items with pagination metadata."""
    return ApiResponse(
        success=True,
        data=list(items),
        meta=ApiMeta(page=page, limit=limit, total=total, count=len(items)),
    )


def dump_envelope(envelope: ApiResponse[Any]) -> dict[str, Any]:
    """Serialize an envelope to JSON-ready primitives, dropping absent keys."""
    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
