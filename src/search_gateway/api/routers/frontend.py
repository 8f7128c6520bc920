"""Catch-all route serving the bundled single-page front end."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from search_gateway.api.dependencies import get_static_resolver
from search_gateway.assets.resolver import StaticFallbackResolver

router = APIRouter(tags=["frontend"])

DIST_DIR = Path(__file__).resolve().parents[2] / "frontend" / "dist"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
def serve_frontend(
    request: Request,
    resolver: StaticFallbackResolver = Depends(get_static_resolver),
) -> Response:
    """Serve a bundled asset, or the app entry document for client-side routes."""
    return resolver.resolve(request.url.path)
