"""Health payload assembly."""

from __future__ import annotations

from typing import Any

from search_gateway.config.settings import AppSettings
from search_gateway.search.backend import SearchBackend


def _plugin_names(backend: SearchBackend | None) -> list[str]:
    if backend is None:
        return []
    manager = backend.get_plugin_manager()
    if manager is None:
        return []
    return [plugin.name() for plugin in manager.get_plugins()]


def build_health_status(settings: AppSettings, backend: SearchBackend | None) -> dict[str, Any]:
    """Return the health payload for the current configuration.

    ``plugin_count`` and ``plugins`` are only present when async plugins are
    enabled; a missing backend or plugin manager then reports zero plugins.
    """
    plugins_enabled = settings.async_plugin_enabled
    channels = list(settings.default_channels)

    status: dict[str, Any] = {
        "status": "ok",
        "plugins_enabled": plugins_enabled,
        "channels": channels,
        "channels_count": len(channels),
    }

    if plugins_enabled:
        names = _plugin_names(backend)
        status["plugin_count"] = len(names)
        status["plugins"] = names

    return status
