"""
Import cache for Dent files.

Files are keyed by canonical path. The first request for a path inserts an
in-progress placeholder before the file is read; a recursive import of the
same path observes the placeholder and gets ``None``, which is how
self-referential imports terminate. Entries live as long as the engine.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path

from dent.core.errors import DentError, DentIOError
from dent.core.parser import parse_text
from dent.core.registry import FunctionRegistry
from dent.core.values import Value, clone

logger = logging.getLogger(__name__)


class ImportState(StrEnum):
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass
class ImportEntry:
    """Cached import: retained source text and the parsed value."""

    state: ImportState = ImportState.IN_PROGRESS
    text: str = ""
    value: Value = None


class ImportCache:
    """Memoizes file imports and guards against import cycles.

    The lock is shared with the engine's function registry. It is held only
    to check or update entries, never while reading or parsing a file, so
    imports of different paths run in parallel.
    """

    def __init__(
        self,
        functions: FunctionRegistry,
        lock: threading.Lock | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._functions = functions
        self._lock = lock or threading.Lock()
        self._encoding = encoding
        self._entries: dict[Path, ImportEntry] = {}

    @staticmethod
    def canonicalize(path: str | Path) -> Path:
        """Resolve ``path`` to the absolute path used as the cache key.

        Raises:
            DentIOError: If the path does not exist or cannot be resolved.
        """
        try:
            return Path(path).resolve(strict=True)
        except OSError as e:
            raise DentIOError.from_os_error(e) from e
        except RuntimeError as e:
            # Symlink loop on interpreters that report it this way
            raise DentIOError("FilesystemLoop", str(e)) from e
        except ValueError as e:
            # Embedded NUL byte
            raise DentIOError("InvalidInput", str(e)) from e

    def load(self, path: str | Path) -> Value:
        """Import a file, returning an independent copy of its value.

        A path whose import is still in flight (a cycle) yields ``None``.
        Read and parse failures are recorded as ``None`` for the path and
        raised to this caller; later requests get the cached ``None``.

        Raises:
            DentIOError: If the file cannot be resolved, read, or decoded.
            ParseError: If the file is not valid Dent.
        """
        key = self.canonicalize(path)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                if entry.state == ImportState.IN_PROGRESS:
                    logger.debug("Import cycle on %s, using none", key)
                else:
                    logger.debug("Import cache hit for %s", key)
                return clone(entry.value)
            self._entries[key] = ImportEntry()

        logger.debug("Importing %s", key)
        text = ""
        value: Value = None
        try:
            text = self._read(key)
            value = parse_text(text, self._functions)
        finally:
            self._commit(key, text, value)

        # The cache holds its own copy, so the freshly parsed tree is the caller's
        return value

    def _read(self, key: Path) -> str:
        try:
            return key.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise DentIOError("InvalidData", str(e)) from e
        except OSError as e:
            raise DentIOError.from_os_error(e) from e

    def _commit(self, key: Path, text: str, value: Value) -> None:
        with self._lock:
            entry = self._entries[key]
            entry.state = ImportState.DONE
            entry.text = text
            entry.value = clone(value)

    def entry(self, path: str | Path) -> ImportEntry | None:
        """Return a snapshot of the cache entry for a path, if one exists."""
        try:
            key = self.canonicalize(path)
        except DentIOError:
            return None
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            snapshot = replace(entry)
        snapshot.value = clone(snapshot.value)
        return snapshot

    def paths(self) -> list[Path]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return self.entry(path) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def try_load(cache: ImportCache, path: str | Path) -> Value:
    """Import a file, converting any failure into ``None``."""
    try:
        return cache.load(path)
    except DentError as e:
        logger.warning("Import of %s failed: %s", path, e)
        return None
