"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from search_gateway.api.dependencies import get_app_settings, get_search_backend
from search_gateway.config.settings import AppSettings
from search_gateway.search.backend import SearchBackend
from search_gateway.services.health import build_health_status

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service health and configuration")
async def healthcheck(
    settings: AppSettings = Depends(get_app_settings),
    backend: SearchBackend | None = Depends(get_search_backend),
) -> dict[str, Any]:
    """Return service status, configured channels and loaded plugins."""
    return build_health_status(settings, backend)
