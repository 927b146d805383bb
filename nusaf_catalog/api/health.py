"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from nusaf_catalog.catalog.taxonomy import CATEGORY_DEFINITIONS

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from nusaf_catalog.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="nusaf-catalog",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str | int]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status and the number of loaded categories.
    """
    return {"status": "ready", "categories": len(CATEGORY_DEFINITIONS)}
