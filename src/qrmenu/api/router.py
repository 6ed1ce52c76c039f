"""Root API router with health endpoints and module mounting."""

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from qrmenu import __version__
from qrmenu.api.dependencies import DBSession
from qrmenu.config import settings
from qrmenu.core.auth.routes import router as auth_router
from qrmenu.modules import discover_modules


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    checks: dict[str, str]


# Create root API router
api_router = APIRouter()

# Health check endpoints (no /api prefix)
health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health/live",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns 200 if the process is running.",
)
async def liveness() -> HealthResponse:
    """Liveness probe endpoint."""
    return HealthResponse(status="alive")


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Checks database connectivity.",
)
async def readiness(db: DBSession) -> JSONResponse:
    """Readiness probe endpoint."""
    checks: dict[str, str] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except SQLAlchemyError as e:
        checks["database"] = type(e).__name__

    all_ok = all(v == "ok" for v in checks.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK
        if all_ok
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if all_ok else "degraded",
            "checks": checks,
        },
    )


@health_router.get(
    "/info",
    summary="Application info",
    description="Returns application metadata.",
)
async def info() -> dict[str, Any]:
    """Application info endpoint."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "debug": settings.debug,
        "image_uploads": bool(settings.cloudinary_cloud_name),
    }


# Application API under /api
prefixed_router = APIRouter(prefix="/api")
prefixed_router.include_router(auth_router)

# Mount discovered module routers
for module_router in discover_modules():
    prefixed_router.include_router(module_router)

# Include routers in main api_router
api_router.include_router(health_router)
api_router.include_router(prefixed_router)
