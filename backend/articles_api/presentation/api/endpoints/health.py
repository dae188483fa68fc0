"""Health check endpoint — reports version and configured record store."""

from fastapi import APIRouter

from articles_api.config import get_settings
from articles_api.infrastructure.database import engine

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": engine.url.get_backend_name(),
    }
