"""
Pydantic schemas for order API request/response validation.

These schemas enforce input shape and define the API contract.
Business rules (minimum total, maximum quantity, transitions)
are enforced by the order service, not here.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from app.domain.orders.entities import Order, OrderItem, OrderStatus
from app.interfaces.schemas import CamelModel


class OrderItemRequest(CamelModel):
    """A requested order line.

    Attributes:
        product_id: Product UUID.
        quantity: Units ordered, a positive integer.
        price: Unit price, strictly positive.
    """

    product_id: UUID
    quantity: int = Field(..., gt=0, description="Units ordered")
    price: Decimal = Field(..., gt=0, description="Unit price")


class CreateOrderRequest(CamelModel):
    """Request schema for order creation. The total is computed server-side."""

    user_id: UUID
    items: list[OrderItemRequest] = Field(
        ..., min_length=1, description="At least one item is required"
    )


class UpdateOrderStatusRequest(CamelModel):
    """Request schema for a status transition."""

    status: OrderStatus


class OrderItemSchema(CamelModel):
    """An order line in responses."""

    product_id: str
    quantity: int
    price: float

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemSchema":
        return cls(product_id=item.product_id, quantity=item.quantity, price=float(item.price))


class OrderSchema(CamelModel):
    """An order in responses. Money is serialized as JSON numbers."""

    id: str
    user_id: str
    status: OrderStatus
    total: float
    items: list[OrderItemSchema]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderSchema":
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total=float(order.total),
            items=[OrderItemSchema.from_entity(item) for item in order.items],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
