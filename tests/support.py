"""Fakes and helpers shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from search_gateway.config.settings import AppSettings
from search_gateway.search.schemas import SearchRequest

INDEX_HTML = b"<!DOCTYPE html><html><body><div id=\"app\">Search Gateway</div></body></html>"

DEFAULT_FILES = {
    "index.html": INDEX_HTML,
    "assets/app.js": b"console.log('search gateway');\n",
    "assets/app.css": b"body { margin: 0; }\n",
    "LICENSE": b"MIT\n",
}


@dataclass
class FakePlugin:
    plugin_name: str

    def name(self) -> str:
        return self.plugin_name


@dataclass
class FakePluginManager:
    plugins: list[FakePlugin]

    def get_plugins(self) -> list[FakePlugin]:
        return list(self.plugins)


@dataclass
class FakeSearchBackend:
    manager: FakePluginManager | None = None
    calls: list[SearchRequest] = field(default_factory=list)

    def get_plugin_manager(self) -> FakePluginManager | None:
        return self.manager

    def search(self, request: SearchRequest) -> dict[str, Any]:
        self.calls.append(request)
        return {"total": 1, "merged_by_type": {"quark": [{"url": "https://pan.example/s/1", "note": request.keyword}]}}


def backend_with_plugins(*names: str) -> FakeSearchBackend:
    return FakeSearchBackend(manager=FakePluginManager([FakePlugin(name) for name in names]))


def make_settings(**overrides: Any) -> AppSettings:
    values: dict[str, Any] = {
        "async_plugin_enabled": False,
        "default_channels": ["tgsearchers3"],
        "cors_allow_origins": ["*"],
        "gzip_minimum_size": 1024,
    }
    values.update(overrides)
    return AppSettings(**values)
