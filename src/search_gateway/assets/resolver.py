"""Serve bundled assets with a single-page-app fallback."""

from __future__ import annotations

from starlette.responses import Response

from search_gateway.assets.store import AssetNotFoundError, AssetStore
from search_gateway.config.logging import get_logger

LOGGER = get_logger(__name__)

FALLBACK_DOCUMENT = "index.html"
FALLBACK_MEDIA_TYPE = "text/html"


def normalize_request_path(path: str, fallback_document: str = FALLBACK_DOCUMENT) -> str:
    """Strip one leading ``/``; the web root maps to the fallback document."""
    if path.startswith("/"):
        path = path[1:]
    return path or fallback_document


class StaticFallbackResolver:
    """Resolve route misses against an :class:`AssetStore`.

    A miss on the requested path serves the fallback document as HTML so
    client-side routes work for deep links. If the fallback document is
    missing as well the response is an empty 404.
    """

    def __init__(self, store: AssetStore, fallback_document: str = FALLBACK_DOCUMENT) -> None:
        self.store = store
        self.fallback_document = fallback_document

    def resolve(self, request_path: str) -> Response:
        lookup_path = normalize_request_path(request_path, self.fallback_document)

        try:
            with self.store.open(lookup_path) as handle:
                body = handle.read()
                return Response(content=body, status_code=200, media_type=handle.content_type)
        except AssetNotFoundError:
            pass

        return self._serve_fallback(request_path)

    def _serve_fallback(self, request_path: str) -> Response:
        try:
            with self.store.open(self.fallback_document) as handle:
                body = handle.read()
        except AssetNotFoundError:
            LOGGER.warning(
                "Fallback document missing from asset bundle",
                extra={"path": request_path, "fallback_document": self.fallback_document},
            )
            return Response(status_code=404)

        return Response(content=body, status_code=200, media_type=FALLBACK_MEDIA_TYPE)
