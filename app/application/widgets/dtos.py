"""
Data Transfer Objects for the widgets application layer.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.widgets.entities import Widget
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE


@dataclass(frozen=True)
class WidgetCommand:
    """Input DTO for creating or renaming a widget. ``name`` is untrimmed."""

    name: str


@dataclass(frozen=True)
class ListWidgetsQuery:
    """Input DTO for listing widgets.

    Attributes:
        page: 1-based page number.
        limit: Page size, 1 to 100.
        name: Optional case-insensitive substring filter.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    name: Optional[str] = None


@dataclass(frozen=True)
class WidgetPage:
    """Output DTO for one page of widgets."""

    widgets: list[Widget]
    page: int
    limit: int
    total: int
