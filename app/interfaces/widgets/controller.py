"""
Widget controller. HTTP concerns only.
"""

from typing import Optional
from uuid import UUID

from app.application.widgets.dtos import ListWidgetsQuery, WidgetCommand
from app.application.widgets.widget_service import WidgetService
from app.interfaces.schemas import DeletedSchema
from app.interfaces.widgets.schemas import WidgetRequest, WidgetSchema
from app.shared.envelope import ApiResponse, paginated_response, success_response


class WidgetController:
    """Adapts HTTP requests to WidgetService calls."""

    def __init__(self, widget_service: WidgetService) -> None:
        self._widget_service = widget_service

    async def get_widget(self, widget_id: UUID) -> ApiResponse[WidgetSchema]:
        widget = await self._widget_service.get_widget_by_id(str(widget_id))
        return success_response(WidgetSchema.from_entity(widget))

    async def list_widgets(
        self, page: int, limit: int, name: Optional[str] = None
    ) -> ApiResponse[list[WidgetSchema]]:
        result = await self._widget_service.list_widgets(
            ListWidgetsQuery(page=page, limit=limit, name=name)
        )
        return paginated_response(
            [WidgetSchema.from_entity(widget) for widget in result.widgets],
            result.page,
            result.limit,
            result.total,
        )

    async def create_widget(self, request: WidgetRequest) -> ApiResponse[WidgetSchema]:
        widget = await self._widget_service.create_widget(WidgetCommand(name=request.name))
        return success_response(WidgetSchema.from_entity(widget))

    async def update_widget(
        self, widget_id: UUID, request: WidgetRequest
    ) -> ApiResponse[WidgetSchema]:
        widget = await self._widget_service.update_widget(
            str(widget_id), WidgetCommand(name=request.name)
        )
        return success_response(WidgetSchema.from_entity(widget))

    async def delete_widget(self, widget_id: UUID) -> ApiResponse[DeletedSchema]:
        await self._widget_service.delete_widget(str(widget_id))
        return success_response(DeletedSchema(deleted=True))
