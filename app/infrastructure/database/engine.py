"""
Async database engine.

A single SQLAlchemy AsyncEngine (asyncpg driver) is created at start-up
and shared by every repository; it is disposed on shutdown.
No ORM: repositories issue plain SQL through ``sqlalchemy.text``.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from app.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).with_name("schema.sql")


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine from application settings.

    Connections are created lazily; nothing is opened here.

    Args:
        settings: Application settings (URL and pool sizing).

    Returns:
        A configured AsyncEngine.
    """
    return create_async_engine(
        settings.get_async_database_url(),
        pool_size=settings.db_pool_size,
        pool_recycle=settings.db_pool_recycle_seconds,
        pool_pre_ping=True,
        connect_args={"timeout": settings.db_connect_timeout_seconds},
    )


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close every pooled connection."""
    await engine.dispose()
    logger.info("Database connections closed")


@asynccontextmanager
async def transaction(engine: AsyncEngine) -> AsyncIterator[AsyncConnection]:
    """Yield a connection inside a transaction committed on exit.

    The transaction is rolled back if the block raises.
    """
    async with engine.begin() as conn:
        yield conn


def split_statements(sql: str) -> list[str]:
    """Split a schema script into individual statements.

    asyncpg cannot run several statements in one prepared call.
    Comment lines are dropped; statements must not contain ``;``.
    """
    lines = [line for line in sql.splitlines() if not line.strip().startswith("--")]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


async def apply_schema(engine: AsyncEngine, path: Path = DEFAULT_SCHEMA_PATH) -> int:
    """Execute every statement of a SQL schema file in one transaction.

    Args:
        engine: Target engine.
        path: Path to the schema file.

    Returns:
        Number of statements executed.
    """
    statements = split_statements(path.read_text(encoding="utf-8"))
    async with transaction(engine) as conn:
        for statement in statements:
            await conn.exec_driver_sql(statement)
    logger.info("Applied %d schema statement(s) from %s", len(statements), path)
    return len(statements)
