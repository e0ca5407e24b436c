"""
Domain entities for the orders bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Legal next statuses per current status. Delivered and cancelled are terminal.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

DELETABLE_STATUSES = frozenset({OrderStatus.PENDING})

MIN_ORDER_TOTAL = Decimal("1")
MAX_ITEMS_PER_ORDER = 100


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Return True if an order in ``current`` may move to ``target``."""
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


@dataclass(frozen=True)
class OrderItem:
    """A single order line."""

    product_id: str
    quantity: int
    price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


def calculate_total(items: Iterable[OrderItem]) -> Decimal:
    """Exact sum of price x quantity over all lines."""
    return sum((item.subtotal for item in items), Decimal("0"))


def total_quantity(items: Iterable[OrderItem]) -> int:
    """Sum of quantities over all lines."""
    return sum(item.quantity for item in items)


@dataclass(frozen=True)
class Order:
    """A customer order.

    ``total`` is derived from the items at creation time and is never
    mutated on its own afterwards.
    """

    id: str
    user_id: str
    status: OrderStatus
    total: Decimal
    items: tuple[OrderItem, ...]
    created_at: datetime
    updated_at: datetime
