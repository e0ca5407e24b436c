"""
CLI entry point for the Order Desk service.

Usage:
    # Run the HTTP server
    python -m app serve --port 3000

    # Run with auto-reload (development)
    python -m app serve --reload

    # Create tables and indexes
    python -m app init-db
"""

import argparse
import asyncio
import logging
from pathlib import Path

from app.core.config import settings
from app.infrastructure.database import apply_schema, create_engine, dispose_engine
from app.infrastructure.database.engine import DEFAULT_SCHEMA_PATH
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI application under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


async def _init_db(schema: Path) -> int:
    engine = create_engine(settings)
    try:
        return await apply_schema(engine, schema)
    finally:
        await dispose_engine(engine)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Apply the SQL schema to the configured database."""
    count = asyncio.run(_init_db(args.schema))
    logger.info("Database ready: %d statement(s) executed.", count)


def main(argv: list[str] | None = None) -> None:
    configure_logging(settings)

    parser = argparse.ArgumentParser(description="Order Desk service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument(
        "--host", default=settings.host,
        help=f"Interface to bind (default {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Port to listen on (default {settings.port})",
    )
    serve_parser.add_argument(
        "--reload", action="store_true",
        help="Restart the server when source files change",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Schema
    db_parser = subparsers.add_parser("init-db", help="Create tables and indexes")
    db_parser.add_argument(
        "--schema", type=Path, default=DEFAULT_SCHEMA_PATH,
        help="Path to the SQL schema file",
    )
    db_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
