"""
Service: order business rules and orchestration.

Input: DTOs from the interface layer.
Output: Order entities / OrderPage.
Side effects: order persistence through the OrderRepository port.
Failure cases: OrderNotFoundError, ValidationError (creation limits),
InvalidStatusTransitionError, OrderNotDeletableError.

Each operation re-reads the current order before validating it. The
read and the following write are separate repository calls and are not
wrapped in a transaction, so a concurrent transition or delete on the
same order can interleave between them.
"""

import json
import logging
from decimal import Decimal
from typing import Any

from app.application.orders.dtos import (
    CreateOrderCommand,
    ListOrdersQuery,
    OrderPage,
    UpdateOrderStatusCommand,
)
from app.domain.orders.entities import (
    DELETABLE_STATUSES,
    MAX_ITEMS_PER_ORDER,
    MIN_ORDER_TOTAL,
    Order,
    OrderItem,
    OrderStatus,
    calculate_total,
    can_transition,
    total_quantity,
)
from app.domain.orders.errors import (
    InvalidStatusTransitionError,
    OrderNotDeletableError,
    OrderNotFoundError,
)
from app.domain.orders.ports import OrderRepository, OrderRow
from app.shared.errors.base import ValidationError
from app.shared.pagination import validate_page_window

logger = logging.getLogger(__name__)


def _to_item(raw: dict[str, Any]) -> OrderItem:
    return OrderItem(
        product_id=str(raw["product_id"]),
        quantity=int(raw["quantity"]),
        price=Decimal(str(raw["price"])),
    )


def to_order(row: OrderRow) -> Order:
    """Map a persisted row to an Order entity.

    The items column may come back as decoded JSON or as raw text,
    depending on the driver.
    """
    raw_items = row["items"]
    if isinstance(raw_items, (str, bytes)):
        raw_items = json.loads(raw_items)

    return Order(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        status=OrderStatus(row["status"]),
        total=Decimal(str(row["total"])),
        items=tuple(_to_item(item) for item in raw_items or ()),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _serialize_item(item: OrderItem) -> dict[str, Any]:
    return {
        "product_id": item.product_id,
        "quantity": item.quantity,
        "price": str(item.price),
    }


class OrderService:
    """Applies order creation rules and the status state machine.

    Transitions: pending -> confirmed | cancelled, confirmed -> shipped |
    cancelled, shipped -> delivered. Delivered and cancelled are terminal.
    """

    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    async def get_order_by_id(self, order_id: str) -> Order:
        """Return an order.

        Raises:
            OrderNotFoundError: If the order does not exist.
        """
        row = await self._order_repository.find_by_id(order_id)
        if row is None:
            raise OrderNotFoundError(order_id)
        return to_order(row)

    async def list_orders(self, query: ListOrdersQuery) -> OrderPage:
        """Return one page of orders with the total matching count.

        Raises:
            ValidationError: If page < 1 or limit is outside 1-100.
        """
        validate_page_window(query.page, query.limit)

        rows, total = await self._order_repository.find_many(
            page=query.page,
            limit=query.limit,
            user_id=query.user_id,
            status=query.status,
        )
        return OrderPage(
            orders=[to_order(row) for row in rows],
            page=query.page,
            limit=query.limit,
            total=total,
        )

    async def create_order(self, command: CreateOrderCommand) -> Order:
        """Validate and persist a new pending order.

        The total is the exact sum of price x quantity over the items.

        Raises:
            ValidationError: If there are no items, the total is below 1,
                or more than 100 units are ordered.
        """
        items = tuple(
            OrderItem(product_id=i.product_id, quantity=i.quantity, price=i.price)
            for i in command.items
        )
        if not items:
            raise ValidationError("At least one item is required")

        total = calculate_total(items)
        if total < MIN_ORDER_TOTAL:
            raise ValidationError(
                f"Order total must be at least ${MIN_ORDER_TOTAL}",
                details=[{"field": "items", "message": f"Order total is {total}"}],
            )

        quantity = total_quantity(items)
        if quantity > MAX_ITEMS_PER_ORDER:
            raise ValidationError(
                f"Maximum {MAX_ITEMS_PER_ORDER} items per order",
                details=[{"field": "items", "message": f"Order contains {quantity} items"}],
            )

        logger.info(
            "Creating order for user=%s: %d line(s), total=%s",
            command.user_id,
            len(items),
            total,
        )
        row = await self._order_repository.create(
            user_id=command.user_id,
            items=[_serialize_item(item) for item in items],
            total=total,
            status=OrderStatus.PENDING,
        )
        return to_order(row)

    async def update_order_status(
        self, order_id: str, command: UpdateOrderStatusCommand
    ) -> Order:
        """Move an order to a new status if the transition map allows it.

        Raises:
            OrderNotFoundError: If the order does not exist.
            InvalidStatusTransitionError: If the transition is not allowed.
        """
        row = await self._order_repository.find_by_id(order_id)
        if row is None:
            raise OrderNotFoundError(order_id)

        current = OrderStatus(row["status"])
        target = command.status
        if not can_transition(current, target):
            raise InvalidStatusTransitionError(current.value, target.value)

        logger.info("Order %s: %s -> %s", order_id, current.value, target.value)
        updated = await self._order_repository.update_status(order_id, target)
        if updated is None:
            raise OrderNotFoundError(order_id)
        return to_order(updated)

    async def cancel_order(self, order_id: str) -> Order:
        """Transition an order to cancelled."""
        return await self.update_order_status(
            order_id, UpdateOrderStatusCommand(status=OrderStatus.CANCELLED)
        )

    async def delete_order(self, order_id: str) -> None:
        """Delete an order that is still pending.

        Raises:
            OrderNotFoundError: If the order does not exist.
            OrderNotDeletableError: If the order is not pending.
        """
        row = await self._order_repository.find_by_id(order_id)
        if row is None:
            raise OrderNotFoundError(order_id)

        status = OrderStatus(row["status"])
        if status not in DELETABLE_STATUSES:
            raise OrderNotDeletableError(order_id, status.value)

        deleted = await self._order_repository.delete(order_id)
        if not deleted:
            raise OrderNotFoundError(order_id)
        logger.info("Deleted order %s", order_id)
