"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import Settings
from ..dependencies import ServiceContainer, get_app_settings, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a one-row query against the users table. Answers 503 when the
    database cannot be reached.
    """
    try:
        container.db.table("users").select("id").limit(1).execute()
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        response.status_code = 503
        return ReadinessResponse(status="unavailable", database="unreachable")
    return ReadinessResponse(status="ready", database="connected")
