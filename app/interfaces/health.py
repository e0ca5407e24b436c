"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, time and version.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.interfaces.schemas import HealthSchema
from app.shared.envelope import ApiResponse, success_response

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=ApiResponse[HealthSchema],
    response_model_exclude_none=True,
    summary="Health check",
    description="Returns application health status, server time and version.",
)
def health_check(request: Request) -> ApiResponse[HealthSchema]:
    """Return current application health status."""
    return success_response(
        HealthSchema(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=request.app.version,
        )
    )
