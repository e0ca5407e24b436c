"""
FastAPI router for widgets.

All routes delegate to the WidgetController. No business logic here.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.domain.widgets.entities import NAME_MAX_LENGTH
from app.interfaces.dependencies import get_widget_controller
from app.interfaces.schemas import ERROR_RESPONSES, DeletedSchema
from app.interfaces.widgets.controller import WidgetController
from app.interfaces.widgets.schemas import WidgetRequest, WidgetSchema
from app.shared.envelope import ApiResponse
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/widgets", tags=["widgets"])


@router.get(
    "",
    response_model=ApiResponse[list[WidgetSchema]],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="List widgets",
    description="Paginated widgets, optionally filtered by a case-insensitive name fragment.",
)
async def list_widgets(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    name: Optional[str] = Query(None, min_length=1, max_length=NAME_MAX_LENGTH),
    controller: WidgetController = Depends(get_widget_controller),
) -> ApiResponse[list[WidgetSchema]]:
    return await controller.list_widgets(page, limit, name)


@router.get(
    "/{widget_id}",
    response_model=ApiResponse[WidgetSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Get a widget",
)
async def get_widget(
    widget_id: UUID,
    controller: WidgetController = Depends(get_widget_controller),
) -> ApiResponse[WidgetSchema]:
    return await controller.get_widget(widget_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[WidgetSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Create a widget",
)
async def create_widget(
    request: WidgetRequest,
    controller: WidgetController = Depends(get_widget_controller),
) -> ApiResponse[WidgetSchema]:
    return await controller.create_widget(request)


@router.patch(
    "/{widget_id}",
    response_model=ApiResponse[WidgetSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Rename a widget",
)
async def update_widget(
    widget_id: UUID,
    request: WidgetRequest,
    controller: WidgetController = Depends(get_widget_controller),
) -> ApiResponse[WidgetSchema]:
    return await controller.update_widget(widget_id, request)


@router.delete(
    "/{widget_id}",
    response_model=ApiResponse[DeletedSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Delete a widget",
)
async def delete_widget(
    widget_id: UUID,
    controller: WidgetController = Depends(get_widget_controller),
) -> ApiResponse[DeletedSchema]:
    return await controller.delete_widget(widget_id)
