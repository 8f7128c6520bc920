"""Middleware applied to every request, route misses included."""

from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from search_gateway.config.logging import get_logger
from search_gateway.config.settings import AppSettings

ACCESS_LOGGER = get_logger("search_gateway.access")

CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = [
    "Origin",
    "Content-Type",
    "Content-Length",
    "Accept-Encoding",
    "X-CSRF-Token",
    "Authorization",
]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of each handled request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        client = request.client.host if request.client else None
        try:
            response = await call_next(request)
        except Exception:
            ACCESS_LOGGER.exception(
                "Request failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": 500,
                    "latency_ms": _elapsed_ms(started),
                    "client": client,
                },
            )
            raise

        latency_ms = _elapsed_ms(started)
        ACCESS_LOGGER.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "latency_ms": latency_ms,
                "client": client,
            },
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def install_middleware(app: FastAPI, settings: AppSettings) -> None:
    """Install CORS, request logging and gzip, outermost first.

    Starlette wraps the most recently added middleware around the others,
    so they are registered innermost first.
    """
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
