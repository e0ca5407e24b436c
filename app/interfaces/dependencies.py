"""
FastAPI dependency functions.

Routers never build their collaborators; they pull controllers out of
the container that the composition root stored on ``app.state``.
"""

from fastapi import Request

from app.container import Container
from app.interfaces.orders.controller import OrderController
from app.interfaces.widgets.controller import WidgetController


def get_container(request: Request) -> Container:
    """Return the application container."""
    return request.app.state.container


def get_order_controller(request: Request) -> OrderController:
    """Return the wired OrderController."""
    return get_container(request).orders.controller


def get_widget_controller(request: Request) -> WidgetController:
    """Return the wired WidgetController."""
    return get_container(request).widgets.controller
