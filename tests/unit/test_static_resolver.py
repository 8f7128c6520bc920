import logging

import pytest

from search_gateway.assets.resolver import StaticFallbackResolver, normalize_request_path
from search_gateway.assets.store import AssetHandle, AssetStore

INDEX = b"<html>app</html>"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/", "index.html"),
        ("", "index.html"),
        ("/assets/app.js", "assets/app.js"),
        ("//double", "/double"),
        ("relative.txt", "relative.txt"),
    ],
)
def test_normalize_request_path(path: str, expected: str) -> None:
    assert normalize_request_path(path) == expected


def test_found_asset_uses_inferred_content_type() -> None:
    resolver = StaticFallbackResolver(AssetStore.from_files({"index.html": INDEX, "logo.png": b"\x89PNG"}))

    response = resolver.resolve("/logo.png")

    assert response.status_code == 200
    assert response.body == b"\x89PNG"
    assert response.headers["content-type"] == "image/png"
    assert response.headers["content-length"] == "4"


def test_found_asset_without_known_type_has_no_content_type() -> None:
    resolver = StaticFallbackResolver(AssetStore.from_files({"index.html": INDEX, "README": b"hello"}))

    response = resolver.resolve("/README")

    assert response.status_code == 200
    assert "content-type" not in response.headers


def test_miss_serves_fallback_as_html_regardless_of_extension() -> None:
    resolver = StaticFallbackResolver(AssetStore.from_files({"index.html": INDEX}))

    response = resolver.resolve("/images/missing.png")

    assert response.status_code == 200
    assert response.body == INDEX
    assert response.headers["content-type"].startswith("text/html")


def test_custom_fallback_document() -> None:
    resolver = StaticFallbackResolver(AssetStore.from_files({"app.html": INDEX}), fallback_document="app.html")

    assert resolver.resolve("/").body == INDEX
    assert resolver.resolve("/anything").body == INDEX


def test_missing_fallback_returns_empty_404_and_logs(caplog) -> None:
    resolver = StaticFallbackResolver(AssetStore.from_files({"app.js": b"1"}))
    caplog.set_level(logging.WARNING, logger="search_gateway.assets.resolver")

    response = resolver.resolve("/route")

    assert response.status_code == 404
    assert response.body == b""
    assert any("Fallback document missing" in record.getMessage() for record in caplog.records)


def test_handles_closed_on_every_path(monkeypatch) -> None:
    opened: list[AssetHandle] = []
    original_init = AssetHandle.__init__

    def tracking_init(self, entry):
        original_init(self, entry)
        opened.append(self)

    monkeypatch.setattr(AssetHandle, "__init__", tracking_init)
    resolver = StaticFallbackResolver(AssetStore.from_files({"index.html": INDEX, "app.js": b"1"}))

    resolver.resolve("/app.js")
    resolver.resolve("/missing")

    assert len(opened) == 2
    assert all(handle.closed for handle in opened)
