"""Accessors for the collaborators wired into the application at startup."""

from __future__ import annotations

from fastapi import Request

from search_gateway.assets.resolver import StaticFallbackResolver
from search_gateway.config.settings import AppSettings
from search_gateway.search.backend import SearchBackend


def get_app_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_search_backend(request: Request) -> SearchBackend | None:
    return request.app.state.search_backend


def get_static_resolver(request: Request) -> StaticFallbackResolver:
    return request.app.state.static_resolver
