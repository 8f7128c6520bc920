"""CLI entrypoint for running the search gateway."""

from __future__ import annotations

import importlib
from pathlib import Path

import click
import uvicorn

from search_gateway.api.main import create_app
from search_gateway.config.logging import get_logger
from search_gateway.config.settings import get_settings
from search_gateway.search.backend import SearchBackend

LOGGER = get_logger(__name__)


def load_backend(spec: str) -> SearchBackend:
    """Import ``module:factory`` and call the factory."""
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise click.BadParameter(f"Expected 'module:factory', got {spec!r}", param_hint="--backend")
    try:
        factory = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise click.BadParameter(f"Cannot load {spec!r}: {exc}", param_hint="--backend") from exc
    backend = factory()
    if not isinstance(backend, SearchBackend):
        raise click.BadParameter(f"{spec!r} did not return a search backend", param_hint="--backend")
    return backend


@click.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST setting)")
@click.option("--port", type=int, default=None, help="Bind port (defaults to PORT setting)")
@click.option("--backend", "backend_spec", default=None, help="Search backend factory as module:callable")
@click.option(
    "--assets",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Serve front-end files from this directory instead of the bundled build",
)
def serve(host: str | None, port: int | None, backend_spec: str | None, assets: Path | None) -> None:
    """Run the HTTP gateway with uvicorn."""
    settings = get_settings()
    if assets is not None:
        settings = settings.model_copy(update={"assets_dir": assets})

    backend = load_backend(backend_spec) if backend_spec else None
    if backend is None:
        LOGGER.warning("No search backend configured; /api/search will answer 503")

    app = create_app(settings, search_backend=backend)
    bind_host = host or settings.host
    bind_port = port or settings.port
    LOGGER.info("Starting search gateway", extra={"host": bind_host, "port": bind_port})
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)


if __name__ == "__main__":
    serve()
