"""
Byte I/O collaborator used by ``save``/``load``.

The schema layer never touches storage directly; it hands encoded documents to
a ``FileSystem``. ``LocalFileSystem`` covers plain paths and ``file://`` URIs.
"""

from __future__ import annotations

from typing import Protocol

from graphar_schema.core.exceptions import InfoIOError
from graphar_schema.logging import get_logger
from graphar_schema.utils.pathing import local_path

log = get_logger(__name__)


class FileSystem(Protocol):
    def write_bytes(self, path: str, data: bytes) -> None:
        ...

    def read_bytes(self, path: str) -> bytes:
        ...


class LocalFileSystem:
    """Local disk backend. Parent directories are created on write."""

    def write_bytes(self, path: str, data: bytes) -> None:
        try:
            target = local_path(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except (OSError, ValueError) as exc:
            raise InfoIOError(f"cannot write {path}: {exc}") from exc
        log.debug("Wrote %d bytes to %s", len(data), path)

    def read_bytes(self, path: str) -> bytes:
        try:
            return local_path(path).read_bytes()
        except (OSError, ValueError) as exc:
            raise InfoIOError(f"cannot read {path}: {exc}") from exc
