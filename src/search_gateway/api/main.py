"""FastAPI application setup."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from search_gateway.api.middleware import install_middleware
from search_gateway.api.routers import frontend, health, search
from search_gateway.assets.resolver import StaticFallbackResolver
from search_gateway.assets.store import AssetStore
from search_gateway.config.logging import build_logging_config, configure_logging
from search_gateway.config.settings import AppSettings, get_settings
from search_gateway.search.backend import SearchBackend

_settings = get_settings()
configure_logging(build_logging_config(_settings.log_level, _settings.log_format))


def create_app(
    settings: AppSettings | None = None,
    *,
    search_backend: SearchBackend | None = None,
    asset_store: AssetStore | None = None,
) -> FastAPI:
    """Application factory to wire routes and dependencies.

    The route table is complete when this returns: API routes first, then
    the catch-all that hands every route miss to the static resolver.
    Raises :class:`AssetMountError` when the asset directory is unusable.
    """
    settings = settings or get_settings()
    if asset_store is None:
        asset_store = AssetStore.from_directory(settings.assets_dir or frontend.DIST_DIR)

    app = FastAPI(
        title="Search Gateway",
        version="0.1.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        swagger_ui_oauth2_redirect_url="/api/docs/oauth2-redirect",
    )
    app.state.settings = settings
    app.state.search_backend = search_backend
    app.state.static_resolver = StaticFallbackResolver(asset_store)

    install_middleware(app, settings)

    app.include_router(search.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    @app.get("/api/config", include_in_schema=False)
    def show_runtime_configuration() -> dict[str, Any]:
        """Return non-sensitive runtime settings for smoke testing."""
        return settings.snapshot()

    app.include_router(frontend.router)

    return app


app = create_app()
