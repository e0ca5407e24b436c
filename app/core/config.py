"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_DRIVER_SCHEME = "postgresql+asyncpg://"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Runtime mode. ``production`` masks unexpected error
            messages; ``test`` silences error and request logging.
        debug: Enable interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR). Test mode
            never logs below WARNING.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        database_url: PostgreSQL connection URL.
        db_pool_size: Maximum connections kept in the pool.
        db_pool_recycle_seconds: Connections older than this are replaced.
        db_connect_timeout_seconds: Timeout when opening a connection.
        rate_limit_enabled: Enforce request rate limits.
        rate_limit_default: Default rate limit for all endpoints.
        cors_allow_origins: Origins allowed by CORS. ``["*"]`` allows any
            origin; from the environment, pass a JSON array.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Order Desk"
    version: str = "0.1.0"
    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    database_url: str = "postgresql://localhost:5432/test"
    db_pool_size: int = 20
    db_pool_recycle_seconds: int = 30
    db_connect_timeout_seconds: int = 10

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    cors_allow_origins: list[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    def get_async_database_url(self) -> str:
        """Return the database URL rewritten for the asyncpg driver."""
        for scheme in ("postgresql://", "postgres://"):
            if self.database_url.startswith(scheme):
                return ASYNC_DRIVER_SCHEME + self.database_url[len(scheme):]
        return self.database_url


settings = Settings()
