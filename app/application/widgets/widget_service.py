"""
Service: widget name rules and orchestration.

Names are trimmed before they are validated and persisted; a name
that is blank after trimming is rejected.
"""

import logging

from app.application.widgets.dtos import ListWidgetsQuery, WidgetCommand, WidgetPage
from app.domain.widgets.entities import Widget
from app.domain.widgets.errors import EmptyWidgetNameError, WidgetNotFoundError
from app.domain.widgets.ports import WidgetRepository, WidgetRow
from app.shared.pagination import validate_page_window

logger = logging.getLogger(__name__)


def to_widget(row: WidgetRow) -> Widget:
    """Map a persisted row to a Widget entity."""
    return Widget(
        id=str(row["id"]),
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _clean_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise EmptyWidgetNameError()
    return name


class WidgetService:
    """CRUD orchestration for widgets."""

    def __init__(self, widget_repository: WidgetRepository) -> None:
        self._widget_repository = widget_repository

    async def get_widget_by_id(self, widget_id: str) -> Widget:
        row = await self._widget_repository.find_by_id(widget_id)
        if row is None:
            raise WidgetNotFoundError(widget_id)
        return to_widget(row)

    async def list_widgets(self, query: ListWidgetsQuery) -> WidgetPage:
        validate_page_window(query.page, query.limit)

        rows, total = await self._widget_repository.find_many(
            page=query.page, limit=query.limit, name=query.name
        )
        return WidgetPage(
            widgets=[to_widget(row) for row in rows],
            page=query.page,
            limit=query.limit,
            total=total,
        )

    async def create_widget(self, command: WidgetCommand) -> Widget:
        """Persist a widget under its trimmed name.

        Raises:
            EmptyWidgetNameError: If the name is blank after trimming.
        """
        name = _clean_name(command.name)
        row = await self._widget_repository.create(name)
        logger.info("Created widget %s", row["id"])
        return to_widget(row)

    async def update_widget(self, widget_id: str, command: WidgetCommand) -> Widget:
        """Rename a widget to its trimmed new name.

        Raises:
            EmptyWidgetNameError: If the name is blank after trimming.
            WidgetNotFoundError: If the widget does not exist.
        """
        name = _clean_name(command.name)
        row = await self._widget_repository.update(widget_id, name)
        if row is None:
            raise WidgetNotFoundError(widget_id)
        return to_widget(row)

    async def delete_widget(self, widget_id: str) -> None:
        deleted = await self._widget_repository.delete(widget_id)
        if not deleted:
            raise WidgetNotFoundError(widget_id)
        logger.info("Deleted widget %s", widget_id)
