"""
Pagination helpers shared by list operations.

- Default page: 1, default limit: 20
- Limit range: 1 to 100
"""

from app.shared.errors.base import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100


def validate_page_window(page: int, limit: int) -> None:
    """Reject a page window outside the allowed range.

    Raises:
        ValidationError: If page < 1 or limit is outside 1-100.
    """
    if page < DEFAULT_PAGE:
        raise ValidationError(
            "Invalid pagination", details=[{"field": "page", "message": "Page must be at least 1"}]
        )
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise ValidationError(
            "Invalid pagination",
            details=[
                {"field": "limit", "message": f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}"}
            ],
        )


def page_offset(page: int, limit: int) -> int:
    """Number of rows to skip for a 1-based page."""
    return (page - 1) * limit
