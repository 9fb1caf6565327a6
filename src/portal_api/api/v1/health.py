"""Liveness check."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from portal_api.core.config import Settings, get_settings
from portal_api.schemas.common import HealthResponse

health_router = APIRouter(tags=["health"])


@health_router.get("/healthcheck", operation_id="healthcheck")
async def healthcheck(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    """Report that the API process is up. Does not touch the database."""
    return HealthResponse(status="ok", environment=settings.environment, timestamp=datetime.now(UTC))
