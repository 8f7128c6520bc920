"""In-memory store for the bundled front-end files."""

from __future__ import annotations

import io
import mimetypes
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterator, Mapping

from search_gateway.config.logging import get_logger

LOGGER = get_logger(__name__)


class AssetMountError(RuntimeError):
    """The asset tree could not be loaded at startup."""


class AssetNotFoundError(LookupError):
    """No readable file exists at the requested path."""


ENCODING_CONTENT_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
    "br": "application/x-brotli",
}


def guess_content_type(path: str) -> str | None:
    """Infer a content type from the last extension only, ``None`` if unknown.

    ``app.js.gz`` is a gzip file, not JavaScript.
    """
    suffix = PurePosixPath(path).suffix
    if not suffix:
        return None
    content_type, encoding = mimetypes.guess_type(f"asset{suffix}", strict=False)
    if encoding is not None:
        return ENCODING_CONTENT_TYPES.get(encoding)
    return content_type


@dataclass(frozen=True)
class AssetEntry:
    path: str
    content: bytes
    content_type: str | None

    @property
    def size(self) -> int:
        return len(self.content)


class AssetHandle:
    """Open, readable view over a single asset."""

    def __init__(self, entry: AssetEntry) -> None:
        self.entry = entry
        self._stream = io.BytesIO(entry.content)

    @property
    def size(self) -> int:
        return self.entry.size

    @property
    def content_type(self) -> str | None:
        return self.entry.content_type

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def close(self) -> None:
        self._stream.close()


class AssetStore:
    """Immutable mapping from relative ``/``-separated paths to file contents.

    Only regular files are stored, so directory paths resolve as absent.
    """

    def __init__(self, entries: Mapping[str, AssetEntry]) -> None:
        self._entries = dict(entries)

    @classmethod
    def from_files(cls, files: Mapping[str, bytes]) -> AssetStore:
        entries = {
            path: AssetEntry(path=path, content=content, content_type=guess_content_type(path))
            for path, content in files.items()
        }
        return cls(entries)

    @classmethod
    def from_directory(cls, root: Path) -> AssetStore:
        """Snapshot every file below ``root`` into memory."""
        root = Path(root)
        if not root.is_dir():
            raise AssetMountError(f"Asset directory not found: {root}")

        files: dict[str, bytes] = {}
        try:
            for path in sorted(root.rglob("*")):
                if path.is_file():
                    files[path.relative_to(root).as_posix()] = path.read_bytes()
        except OSError as exc:
            raise AssetMountError(f"Unable to read asset directory {root}: {exc}") from exc

        store = cls.from_files(files)
        LOGGER.info("Loaded static assets", extra={"root": str(root), "files": len(store)})
        return store

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def paths(self) -> list[str]:
        return sorted(self._entries)

    def get(self, path: str) -> AssetEntry:
        try:
            return self._entries[path]
        except KeyError:
            raise AssetNotFoundError(path) from None

    @contextmanager
    def open(self, path: str) -> Iterator[AssetHandle]:
        """Yield a handle for ``path``; the handle is closed on exit."""
        handle = AssetHandle(self.get(path))
        try:
            yield handle
        finally:
            handle.close()
