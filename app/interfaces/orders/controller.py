"""
Order controller.

HTTP concerns only: converts validated request data into commands,
calls the order service, and wraps results in the response envelope.
No business logic here.
"""

from typing import Optional
from uuid import UUID

from app.application.orders.dtos import (
    CreateOrderCommand,
    ListOrdersQuery,
    OrderItemInput,
    UpdateOrderStatusCommand,
)
from app.application.orders.order_service import OrderService
from app.domain.orders.entities import OrderStatus
from app.interfaces.orders.schemas import (
    CreateOrderRequest,
    OrderSchema,
    UpdateOrderStatusRequest,
)
from app.interfaces.schemas import DeletedSchema
from app.shared.envelope import ApiResponse, paginated_response, success_response


class OrderController:
    """Adapts HTTP requests to OrderService calls."""

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service

    async def get_order(self, order_id: UUID) -> ApiResponse[OrderSchema]:
        order = await self._order_service.get_order_by_id(str(order_id))
        return success_response(OrderSchema.from_entity(order))

    async def list_orders(
        self,
        page: int,
        limit: int,
        user_id: Optional[UUID] = None,
        status: Optional[OrderStatus] = None,
    ) -> ApiResponse[list[OrderSchema]]:
        result = await self._order_service.list_orders(
            ListOrdersQuery(
                page=page,
                limit=limit,
                user_id=str(user_id) if user_id else None,
                status=status,
            )
        )
        return paginated_response(
            [OrderSchema.from_entity(order) for order in result.orders],
            result.page,
            result.limit,
            result.total,
        )

    async def create_order(self, request: CreateOrderRequest) -> ApiResponse[OrderSchema]:
        command = CreateOrderCommand(
            user_id=str(request.user_id),
            items=tuple(
                OrderItemInput(
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in request.items
            ),
        )
        order = await self._order_service.create_order(command)
        return success_response(OrderSchema.from_entity(order))

    async def update_order_status(
        self, order_id: UUID, request: UpdateOrderStatusRequest
    ) -> ApiResponse[OrderSchema]:
        order = await self._order_service.update_order_status(
            str(order_id), UpdateOrderStatusCommand(status=request.status)
        )
        return success_response(OrderSchema.from_entity(order))

    async def cancel_order(self, order_id: UUID) -> ApiResponse[OrderSchema]:
        order = await self._order_service.cancel_order(str(order_id))
        return success_response(OrderSchema.from_entity(order))

    async def delete_order(self, order_id: UUID) -> ApiResponse[DeletedSchema]:
        await self._order_service.delete_order(str(order_id))
        return success_response(DeletedSchema(deleted=True))
