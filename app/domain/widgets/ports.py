"""
Port interfaces (ABCs) for the widgets bounded context.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, TypedDict


class WidgetRow(TypedDict):
    """Raw persisted widget record."""

    id: Any
    name: str
    created_at: datetime
    updated_at: datetime


class WidgetRepository(ABC):
    """Port for persisting and retrieving widgets."""

    @abstractmethod
    async def find_by_id(self, widget_id: str) -> Optional[WidgetRow]:
        """Return the widget row, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def find_many(
        self, page: int, limit: int, name: Optional[str] = None
    ) -> tuple[list[WidgetRow], int]:
        """Return one page of widgets, newest first, and the filtered total.

        ``name`` is a case-insensitive substring filter.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, name: str) -> WidgetRow:
        """Insert a widget and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, widget_id: str, name: str) -> Optional[WidgetRow]:
        """Rename a widget and return the row, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, widget_id: str) -> bool:
        """Delete a widget. Returns True iff a row was removed."""
        raise NotImplementedError
