from __future__ import annotations

from typing import Callable, Mapping

import pytest
from fastapi.testclient import TestClient

from search_gateway.api.main import create_app
from search_gateway.assets.store import AssetStore
from search_gateway.config.settings import AppSettings
from support import DEFAULT_FILES, FakeSearchBackend, make_settings


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a client around an in-memory asset store and optional fake backend."""

    def _factory(
        *,
        settings: AppSettings | None = None,
        backend: FakeSearchBackend | None = None,
        files: Mapping[str, bytes] | None = None,
    ) -> TestClient:
        app = create_app(
            settings or make_settings(),
            search_backend=backend,
            asset_store=AssetStore.from_files(DEFAULT_FILES if files is None else files),
        )
        return TestClient(app)

    return _factory
