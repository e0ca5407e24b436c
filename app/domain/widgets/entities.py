"""
Domain entities for the widgets bounded context.
"""

from dataclasses import dataclass
from datetime import datetime

NAME_MAX_LENGTH = 200


@dataclass(frozen=True)
class Widget:
    """A named widget. No state machine: created, renamed, deleted."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
