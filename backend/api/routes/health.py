"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    payments: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether Supabase and Stripe are configured. It does not call them.
    """
    settings = get_settings()
    database_ready = bool(settings.supabase_url and settings.supabase_service_role_key)
    payments_ready = bool(settings.stripe_secret_key)

    return ReadinessResponse(
        status="ready" if database_ready and payments_ready else "degraded",
        database="configured" if database_ready else "missing configuration",
        payments="configured" if payments_ready else "missing configuration",
    )
