"""
Database access: async engine lifecycle, transactions, schema setup.
"""

from app.infrastructure.database.engine import (
    apply_schema,
    create_engine,
    dispose_engine,
    transaction,
)

__all__ = ["apply_schema", "create_engine", "dispose_engine", "transaction"]
