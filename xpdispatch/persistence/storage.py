"""Durable key/value storage: one JSON document per key.

The stores only ever see the ``KeyValueStorage`` interface, so tests can
swap in ``tests.persistence.fake_storage.InMemoryStorage``.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

from xpdispatch.config import get_settings
from xpdispatch.persistence.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class KeyValueStorage(Protocol):
    """String-in, string-out storage with the semantics of browser localStorage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


_storage: KeyValueStorage | None = None


class JsonFileStorage:
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which then
    atomically replaces the target, so a crash mid-write leaves the
    previous value intact.

    Text is UTF-8 with ``surrogateescape``, so strings decoded from
    non-UTF-8 filenames (aircraft paths) are written back byte for byte.
    """

    def __init__(self, directory: Path | str):
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not _KEY_RE.fullmatch(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_item(self, key: str) -> str | None:
        """Return the stored text, or *None* if the key was never written."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageReadError(key, str(exc)) from exc

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as fh:
                    fh.write(value)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        # UnicodeEncodeError: lone surrogates outside the escape range
        except (OSError, ValueError) as exc:
            raise StorageWriteError(key, str(exc)) from exc
        logger.debug("Wrote %s (%d bytes)", path, len(value))

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageWriteError(key, str(exc)) from exc


def get_storage() -> KeyValueStorage:
    """Return the lazy-initialized process-wide storage.

    Files live in ``XPDISPATCH_STATE_DIR`` (default ``~/.xpdispatch``).
    """
    global _storage
    if _storage is not None:
        return _storage

    directory = get_settings().state_dir
    _storage = JsonFileStorage(directory)
    logger.info("Using durable storage at %s", directory)
    return _storage


def _reset_storage() -> None:
    """Reset the singleton (for testing only)."""
    global _storage
    _storage = None
