"""
Domain-specific errors for the orders bounded context.

Each one specializes a shared taxonomy kind, so the error registry
maps it without knowing about orders.
"""

from app.shared.errors.base import NotFoundError, ValidationError


class OrderNotFoundError(NotFoundError):
    """Raised when an order cannot be found."""

    def __init__(self, order_id: str) -> None:
        super().__init__("Order", order_id)
        self.order_id = order_id


class InvalidStatusTransitionError(ValidationError):
    """Raised when the requested status is not reachable from the current one."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot transition from '{current}' to '{target}'")
        self.current = current
        self.target = target


class OrderNotDeletableError(ValidationError):
    """Raised when deleting an order that is no longer pending."""

    def __init__(self, order_id: str, status: str) -> None:
        super().__init__("Only pending orders can be deleted")
        self.order_id = order_id
        self.status = status
