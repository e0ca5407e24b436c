"""
Application dependency container.

Manual dependency injection: every feature is wired once at start-up
by explicit constructor calls, layer by layer
(repository -> service -> controller). The dependency graph is static,
so no reflection or auto-wiring is involved.
"""

from dataclasses import dataclass, replace
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.orders.order_service import OrderService
from app.application.widgets.widget_service import WidgetService
from app.domain.orders.ports import OrderRepository
from app.domain.widgets.ports import WidgetRepository
from app.infrastructure.orders.order_repository import OrderRepositoryAdapter
from app.infrastructure.widgets.widget_repository import WidgetRepositoryAdapter
from app.interfaces.orders.controller import OrderController
from app.interfaces.widgets.controller import WidgetController


@dataclass(frozen=True)
class OrdersContainer:
    """All dependencies of the orders feature."""

    repository: OrderRepository
    service: OrderService
    controller: OrderController


@dataclass(frozen=True)
class WidgetsContainer:
    """All dependencies of the widgets feature."""

    repository: WidgetRepository
    service: WidgetService
    controller: WidgetController


@dataclass(frozen=True)
class Container:
    """Root container holding every feature container.

    ``engine`` is None when the features run on non-SQL repositories.
    """

    orders: OrdersContainer
    widgets: WidgetsContainer
    engine: Optional[AsyncEngine] = None


def build_orders_container(repository: OrderRepository) -> OrdersContainer:
    """Wire the orders feature on top of any OrderRepository."""
    service = OrderService(repository)
    return OrdersContainer(
        repository=repository,
        service=service,
        controller=OrderController(service),
    )


def build_widgets_container(repository: WidgetRepository) -> WidgetsContainer:
    """Wire the widgets feature on top of any WidgetRepository."""
    service = WidgetService(repository)
    return WidgetsContainer(
        repository=repository,
        service=service,
        controller=WidgetController(service),
    )


def create_orders_container(engine: AsyncEngine) -> OrdersContainer:
    return build_orders_container(OrderRepositoryAdapter(engine))


def create_widgets_container(engine: AsyncEngine) -> WidgetsContainer:
    return build_widgets_container(WidgetRepositoryAdapter(engine))


def create_container(engine: AsyncEngine) -> Container:
    """Create the application container backed by PostgreSQL.

    Args:
        engine: Shared async engine used by every repository.

    Returns:
        A fully wired Container.
    """
    return Container(
        orders=create_orders_container(engine),
        widgets=create_widgets_container(engine),
        engine=engine,
    )


def create_test_container(
    base: Container,
    orders: Optional[OrdersContainer] = None,
    widgets: Optional[WidgetsContainer] = None,
) -> Container:
    """Return a copy of ``base`` with whole feature containers replaced.

    Useful for injecting mocks or in-memory repositories in tests.
    """
    overrides = {}
    if orders is not None:
        overrides["orders"] = orders
    if widgets is not None:
        overrides["widgets"] = widgets
    return replace(base, **overrides)
