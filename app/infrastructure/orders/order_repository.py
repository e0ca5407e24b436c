"""
Adapter: Order repository.

Implements OrderRepository port.
Responsible for persisting and retrieving orders from PostgreSQL.
No business rules: absence is reported as None / False.
"""

import json
from decimal import Decimal
from typing import Any, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.orders.entities import OrderStatus
from app.domain.orders.ports import OrderRepository, OrderRow
from app.shared.pagination import page_offset

ORDER_COLUMNS = "id, user_id, status, total, items, created_at, updated_at"


class OrderRepositoryAdapter(OrderRepository):
    """PostgreSQL implementation of the order repository.

    Stores orders in the ``orders`` table; line items live in a JSONB column.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def find_by_id(self, order_id: str) -> Optional[OrderRow]:
        query = text(f"SELECT {ORDER_COLUMNS} FROM orders WHERE id = CAST(:id AS UUID)")
        async with self._engine.connect() as conn:
            row = (await conn.execute(query, {"id": order_id})).mappings().first()
        return dict(row) if row is not None else None  # type: ignore[return-value]

    async def find_many(
        self,
        page: int,
        limit: int,
        user_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> tuple[list[OrderRow], int]:
        where = " WHERE 1=1"
        params: dict[str, Any] = {}

        if user_id:
            where += " AND user_id = CAST(:user_id AS UUID)"
            params["user_id"] = user_id

        if status:
            where += " AND status = :status"
            params["status"] = status.value

        rows_query = text(
            f"SELECT {ORDER_COLUMNS} FROM orders{where}"
            " ORDER BY created_at DESC LIMIT :limit OFFSET :offset"
        )
        count_query = text(f"SELECT COUNT(*) FROM orders{where}")

        async with self._engine.connect() as conn:
            result = await conn.execute(
                rows_query,
                {**params, "limit": limit, "offset": page_offset(page, limit)},
            )
            rows = [dict(row) for row in result.mappings().all()]
            total = (await conn.execute(count_query, params)).scalar_one()

        return rows, int(total)  # type: ignore[return-value]

    async def create(
        self,
        user_id: str,
        items: Sequence[dict[str, Any]],
        total: Decimal,
        status: OrderStatus,
    ) -> OrderRow:
        query = text(
            f"""
            INSERT INTO orders (user_id, status, total, items)
            VALUES (CAST(:user_id AS UUID), :status, :total, CAST(:items AS JSONB))
            RETURNING {ORDER_COLUMNS}
            """
        )
        async with self._engine.begin() as conn:
            row = (
                await conn.execute(
                    query,
                    {
                        "user_id": user_id,
                        "status": status.value,
                        "total": total,
                        "items": json.dumps(list(items)),
                    },
                )
            ).mappings().one()
        return dict(row)  # type: ignore[return-value]

    async def update_status(self, order_id: str, status: OrderStatus) -> Optional[OrderRow]:
        query = text(
            f"""
            UPDATE orders
            SET status = :status, updated_at = NOW()
            WHERE id = CAST(:id AS UUID)
            RETURNING {ORDER_COLUMNS}
            """
        )
        async with self._engine.begin() as conn:
            row = (
                await conn.execute(query, {"id": order_id, "status": status.value})
            ).mappings().first()
        return dict(row) if row is not None else None  # type: ignore[return-value]

    async def delete(self, order_id: str) -> bool:
        query = text("DELETE FROM orders WHERE id = CAST(:id AS UUID)")
        async with self._engine.begin() as conn:
            result = await conn.execute(query, {"id": order_id})
        return result.rowcount > 0
