"""
FastAPI router for orders.

All routes delegate to the OrderController. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by the centralized error registry.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.domain.orders.entities import OrderStatus
from app.interfaces.dependencies import get_order_controller
from app.interfaces.orders.controller import OrderController
from app.interfaces.orders.schemas import (
    CreateOrderRequest,
    OrderSchema,
    UpdateOrderStatusRequest,
)
from app.interfaces.schemas import ERROR_RESPONSES, DeletedSchema
from app.shared.envelope import ApiResponse
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get(
    "",
    response_model=ApiResponse[list[OrderSchema]],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="List orders",
    description="Paginated orders, newest first, optionally filtered by user and status.",
)
async def list_orders(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    user_id: Optional[UUID] = Query(None, alias="userId"),
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[list[OrderSchema]]:
    """List orders with pagination metadata."""
    return await controller.list_orders(page, limit, user_id, order_status)


@router.get(
    "/{order_id}",
    response_model=ApiResponse[OrderSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Get an order",
)
async def get_order(
    order_id: UUID,
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[OrderSchema]:
    """Return a single order."""
    return await controller.get_order(order_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[OrderSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Create an order",
    description="Create a pending order. The total is computed from the items.",
)
async def create_order(
    request: CreateOrderRequest,
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[OrderSchema]:
    """Create a new order."""
    return await controller.create_order(request)


@router.patch(
    "/{order_id}/status",
    response_model=ApiResponse[OrderSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Change order status",
    description="Apply a status transition allowed by the order state machine.",
)
async def update_order_status(
    order_id: UUID,
    request: UpdateOrderStatusRequest,
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[OrderSchema]:
    """Transition an order to a new status."""
    return await controller.update_order_status(order_id, request)


@router.post(
    "/{order_id}/cancel",
    response_model=ApiResponse[OrderSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Cancel an order",
)
async def cancel_order(
    order_id: UUID,
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[OrderSchema]:
    """Cancel a pending or confirmed order."""
    return await controller.cancel_order(order_id)


@router.delete(
    "/{order_id}",
    response_model=ApiResponse[DeletedSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Delete an order",
    description="Only pending orders can be deleted.",
)
async def delete_order(
    order_id: UUID,
    controller: OrderController = Depends(get_order_controller),
) -> ApiResponse[DeletedSchema]:
    """Delete a pending order."""
    return await controller.delete_order(order_id)
