"""
Data Transfer Objects for the orders application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from app.domain.orders.entities import Order, OrderStatus
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE


@dataclass(frozen=True)
class OrderItemInput:
    """One requested order line.

    Attributes:
        product_id: Product identifier.
        quantity: Units ordered (>= 1).
        price: Unit price (> 0).
    """

    product_id: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class CreateOrderCommand:
    """Input DTO for creating an order. The total is never client-supplied."""

    user_id: str
    items: tuple[OrderItemInput, ...]


@dataclass(frozen=True)
class UpdateOrderStatusCommand:
    """Input DTO for a status transition."""

    status: OrderStatus


@dataclass(frozen=True)
class ListOrdersQuery:
    """Input DTO for listing orders.

    Attributes:
        page: 1-based page number.
        limit: Page size, 1 to 100.
        user_id: Optional filter by owning user.
        status: Optional filter by status.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    user_id: Optional[str] = None
    status: Optional[OrderStatus] = None


@dataclass(frozen=True)
class OrderPage:
    """Output DTO for one page of orders.

    ``total`` counts every matching order, independent of the page window.
    """

    orders: list[Order]
    page: int
    limit: int
    total: int
