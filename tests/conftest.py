"""
Shared test fixtures.

Provides in-memory repositories implementing the domain ports and a
FastAPI TestClient wired on top of them. No database needed.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional, Sequence
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.container import Container, build_orders_container, build_widgets_container
from app.core.config import Settings
from app.domain.orders.entities import OrderStatus
from app.domain.orders.ports import OrderRepository, OrderRow
from app.domain.widgets.ports import WidgetRepository, WidgetRow
from app.main import create_app
from app.shared.pagination import page_offset


class _Clock:
    """Strictly increasing timestamps so newest-first ordering is stable."""

    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def tick(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class InMemoryOrderRepository(OrderRepository):
    """OrderRepository backed by a dict."""

    def __init__(self) -> None:
        self.rows: dict[str, OrderRow] = {}
        self._clock = _Clock()

    async def find_by_id(self, order_id: str) -> Optional[OrderRow]:
        row = self.rows.get(order_id)
        return dict(row) if row else None  # type: ignore[return-value]

    async def find_many(
        self,
        page: int,
        limit: int,
        user_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> tuple[list[OrderRow], int]:
        rows = [
            row
            for row in self.rows.values()
            if (user_id is None or row["user_id"] == user_id)
            and (status is None or row["status"] == status.value)
        ]
        rows.sort(key=lambda row: row["created_at"], reverse=True)
        offset = page_offset(page, limit)
        return rows[offset:offset + limit], len(rows)

    async def create(
        self,
        user_id: str,
        items: Sequence[dict[str, Any]],
        total: Decimal,
        status: OrderStatus,
    ) -> OrderRow:
        now = self._clock.tick()
        row: OrderRow = {
            "id": str(uuid4()),
            "user_id": user_id,
            "status": status.value,
            "total": total,
            "items": list(items),
            "created_at": now,
            "updated_at": now,
        }
        self.rows[row["id"]] = row
        return dict(row)  # type: ignore[return-value]

    async def update_status(self, order_id: str, status: OrderStatus) -> Optional[OrderRow]:
        row = self.rows.get(order_id)
        if row is None:
            return None
        row["status"] = status.value
        row["updated_at"] = self._clock.tick()
        return dict(row)  # type: ignore[return-value]

    async def delete(self, order_id: str) -> bool:
        return self.rows.pop(order_id, None) is not None


class InMemoryWidgetRepository(WidgetRepository):
    """WidgetRepository backed by a dict."""

    def __init__(self) -> None:
        self.rows: dict[str, WidgetRow] = {}
        self._clock = _Clock()

    async def find_by_id(self, widget_id: str) -> Optional[WidgetRow]:
        row = self.rows.get(widget_id)
        return dict(row) if row else None  # type: ignore[return-value]

    async def find_many(
        self, page: int, limit: int, name: Optional[str] = None
    ) -> tuple[list[WidgetRow], int]:
        rows = [
            row
            for row in self.rows.values()
            if name is None or name.lower() in row["name"].lower()
        ]
        rows.sort(key=lambda row: row["created_at"], reverse=True)
        offset = page_offset(page, limit)
        return rows[offset:offset + limit], len(rows)

    async def create(self, name: str) -> WidgetRow:
        now = self._clock.tick()
        row: WidgetRow = {"id": str(uuid4()), "name": name, "created_at": now, "updated_at": now}
        self.rows[row["id"]] = row
        return dict(row)  # type: ignore[return-value]

    async def update(self, widget_id: str, name: str) -> Optional[WidgetRow]:
        row = self.rows.get(widget_id)
        if row is None:
            return None
        row["name"] = name
        row["updated_at"] = self._clock.tick()
        return dict(row)  # type: ignore[return-value]

    async def delete(self, widget_id: str) -> bool:
        return self.rows.pop(widget_id, None) is not None


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", rate_limit_enabled=False, debug=False)


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def widget_repository() -> InMemoryWidgetRepository:
    return InMemoryWidgetRepository()


@pytest.fixture
def container(
    order_repository: InMemoryOrderRepository,
    widget_repository: InMemoryWidgetRepository,
) -> Container:
    return Container(
        orders=build_orders_container(order_repository),
        widgets=build_widgets_container(widget_repository),
    )


@pytest.fixture
def client(test_settings: Settings, container: Container) -> TestClient:
    app = create_app(settings=test_settings, container=container)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
