"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handling (centralized registry, one envelope for every failure)
- HTTP middleware (CORS, request logging, security headers)
- Rate limiting (router-level dependency)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.container import Container, create_container
from app.core.config import Settings
from app.core.config import settings as default_settings
from app.infrastructure.database import create_engine, dispose_engine
from app.interfaces.health import router as health_router
from app.interfaces.orders.router import router as orders_router
from app.interfaces.widgets.router import router as widgets_router
from app.shared.errors.bootstrap import build_error_registry, setup_error_handling
from app.shared.http.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.shared.http.rate_limiting import build_limiter, build_rate_limit_dependency
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Application settings. Defaults to the environment-driven
            module settings.
        container: Pre-built dependency container. When omitted, a
            PostgreSQL-backed container is created and its engine is
            disposed on shutdown.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(settings)

    owns_engine = container is None
    if container is None:
        container = create_container(create_engine(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s %s starting (environment=%s)",
            settings.project_name,
            settings.version,
            settings.environment,
        )
        yield
        if owns_engine and container.engine is not None:
            await dispose_engine(container.engine)
        logger.info("%s stopped", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    # --- Error Handlers (innermost middleware) ---
    setup_error_handling(app, build_error_registry(settings))

    # --- HTTP Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware, enabled=not settings.is_test)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Rate Limiting ---
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    rate_limit = Depends(build_rate_limit_dependency(limiter, settings.rate_limit_default))

    # --- Routers ---
    app.include_router(health_router, dependencies=[rate_limit])
    app.include_router(orders_router, dependencies=[rate_limit])
    app.include_router(widgets_router, dependencies=[rate_limit])

    return app


app = create_app()
