"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import get_supabase_client

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
    auth: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Returns 503 until the database client can be built and a JWT secret
    is configured.
    """
    settings = get_settings()

    try:
        get_supabase_client()
        database = "configured"
    except RuntimeError as e:
        logger.warning("Database not ready: %s", e)
        database = "unconfigured"

    auth = "configured" if settings.jwt_secret else "unconfigured"
    ready = database == "configured" and auth == "configured"

    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        database=database,
        auth=auth,
    )
    return JSONResponse(status_code=200 if ready else 503, content=body.model_dump())
