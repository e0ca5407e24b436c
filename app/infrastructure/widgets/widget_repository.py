"""
Adapter: Widget repository.

Implements WidgetRepository port against the ``widgets`` table.
"""

from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.widgets.ports import WidgetRepository, WidgetRow
from app.shared.pagination import page_offset

WIDGET_COLUMNS = "id, name, created_at, updated_at"


class WidgetRepositoryAdapter(WidgetRepository):
    """PostgreSQL implementation of the widget repository."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def find_by_id(self, widget_id: str) -> Optional[WidgetRow]:
        query = text(f"SELECT {WIDGET_COLUMNS} FROM widgets WHERE id = CAST(:id AS UUID)")
        async with self._engine.connect() as conn:
            row = (await conn.execute(query, {"id": widget_id})).mappings().first()
        return dict(row) if row is not None else None  # type: ignore[return-value]

    async def find_many(
        self, page: int, limit: int, name: Optional[str] = None
    ) -> tuple[list[WidgetRow], int]:
        """Return one page of widgets, newest first, and the filtered total.

        Args:
            page: 1-based page number.
            limit: Page size.
            name: Optional case-insensitive substring filter (ILIKE).
        """
        where = " WHERE 1=1"
        params: dict[str, Any] = {}

        if name:
            where += " AND name ILIKE :name"
            params["name"] = f"%{name}%"

        rows_query = text(
            f"SELECT {WIDGET_COLUMNS} FROM widgets{where}"
            " ORDER BY created_at DESC LIMIT :limit OFFSET :offset"
        )
        count_query = text(f"SELECT COUNT(*) FROM widgets{where}")

        async with self._engine.connect() as conn:
            result = await conn.execute(
                rows_query,
                {**params, "limit": limit, "offset": page_offset(page, limit)},
            )
            rows = [dict(row) for row in result.mappings().all()]
            total = (await conn.execute(count_query, params)).scalar_one()

        return rows, int(total)  # type: ignore[return-value]

    async def create(self, name: str) -> WidgetRow:
        query = text(
            f"INSERT INTO widgets (name) VALUES (:name) RETURNING {WIDGET_COLUMNS}"
        )
        async with self._engine.begin() as conn:
            row = (await conn.execute(query, {"name": name})).mappings().one()
        return dict(row)  # type: ignore[return-value]

    async def update(self, widget_id: str, name: str) -> Optional[WidgetRow]:
        query = text(
            f"""
            UPDATE widgets
            SET name = :name, updated_at = NOW()
            WHERE id = CAST(:id AS UUID)
            RETURNING {WIDGET_COLUMNS}
            """
        )
        async with self._engine.begin() as conn:
            row = (await conn.execute(query, {"id": widget_id, "name": name})).mappings().first()
        return dict(row) if row is not None else None  # type: ignore[return-value]

    async def delete(self, widget_id: str) -> bool:
        query = text("DELETE FROM widgets WHERE id = CAST(:id AS UUID)")
        async with self._engine.begin() as conn:
            result = await conn.execute(query, {"id": widget_id})
        return result.rowcount > 0
