"""
Shared Pydantic schemas for the HTTP API.

JSON field names are camelCase; Python attributes stay snake_case.
No business logic belongs here.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.shared.envelope import ApiResponse


class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases and accepting both spellings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeletedSchema(BaseModel):
    """Payload returned by successful deletes."""

    deleted: bool = True


class HealthSchema(BaseModel):
    """Payload of the health check endpoint."""

    status: str
    timestamp: datetime
    version: str


# Documented shape of every failed response.
ErrorResponse = ApiResponse[Any]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input or business rule violation"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
}
