"""
Pydantic schemas for widget API request/response validation.
"""

from datetime import datetime

from pydantic import Field

from app.domain.widgets.entities import NAME_MAX_LENGTH, Widget
from app.interfaces.schemas import CamelModel


class WidgetRequest(CamelModel):
    """Request schema for creating or renaming a widget.

    The raw name is length-checked here; blank-after-trim is a service rule.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class WidgetSchema(CamelModel):
    """A widget in responses."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, widget: Widget) -> "WidgetSchema":
        return cls(
            id=widget.id,
            name=widget.name,
            created_at=widget.created_at,
            updated_at=widget.updated_at,
        )
