"""Interfaces of the search backend consumed by the HTTP layer."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from search_gateway.search.schemas import SearchRequest


class SearchPlugin(Protocol):
    def name(self) -> str: ...


class PluginManager(Protocol):
    """Ordered collection of the plugins loaded by the backend."""

    def get_plugins(self) -> Sequence[SearchPlugin]: ...


@runtime_checkable
class SearchBackend(Protocol):
    """Capability injected once at startup.

    ``get_plugin_manager`` may return ``None`` when the plugin subsystem was
    never started, even if async plugins are enabled in the settings.
    """

    def get_plugin_manager(self) -> PluginManager | None: ...

    def search(self, request: SearchRequest) -> Any: ...
