"""
Domain-specific errors for the widgets bounded context.
"""

from app.shared.errors.base import NotFoundError, ValidationError


class WidgetNotFoundError(NotFoundError):
    """Raised when a widget cannot be found."""

    def __init__(self, widget_id: str) -> None:
        super().__init__("Widget", widget_id)
        self.widget_id = widget_id


class EmptyWidgetNameError(ValidationError):
    """Raised when a widget name is blank after trimming."""

    def __init__(self) -> None:
        super().__init__("Widget name cannot be empty")
