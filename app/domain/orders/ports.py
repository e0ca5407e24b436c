"""
Port interfaces (ABCs) for the orders bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
Repositories apply no business rules and never raise domain errors:
absence is signaled by None / False.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence, TypedDict

from app.domain.orders.entities import OrderStatus


class OrderRow(TypedDict):
    """Raw persisted order record, before mapping to an Order entity."""

    id: Any
    user_id: Any
    status: str
    total: Any
    items: Any
    created_at: datetime
    updated_at: datetime


class OrderRepository(ABC):
    """Port for persisting and retrieving orders."""

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[OrderRow]:
        """Return the order row, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def find_many(
        self,
        page: int,
        limit: int,
        user_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> tuple[list[OrderRow], int]:
        """Return one page of orders, newest first, and the filtered total.

        Args:
            page: 1-based page number.
            limit: Page size.
            user_id: Optional filter by owning user.
            status: Optional filter by status.

        Returns:
            Tuple of (rows on the page, count of all matching rows).
        """
        raise NotImplementedError

    @abstractmethod
    async def create(
        self,
        user_id: str,
        items: Sequence[dict[str, Any]],
        total: Decimal,
        status: OrderStatus,
    ) -> OrderRow:
        """Insert a new order and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    async def update_status(self, order_id: str, status: OrderStatus) -> Optional[OrderRow]:
        """Set the status, bump updated_at, and return the row or None."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, order_id: str) -> bool:
        """Delete an order. Returns True iff a row was removed."""
        raise NotImplementedError
