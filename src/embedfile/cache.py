"""Process-wide memoization of file contents read from disk.

Only the development strategy uses this table. It is created on first use,
shared by every ``EmbeddedFile`` in the process and never torn down: entries
are never removed, never expire and are never bounded in number. The table
owns every ``bytes`` object it stores; callers receive the same immutable
object, so a value handed out stays valid for the rest of the process.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional


class RuntimeContentCache:
    """Append-only ``path -> bytes`` table guarded by a single lock.

    ``lookup`` and ``insert`` both take the lock. The lock is re-entrant so
    a caller can hold it across a whole check/read/insert sequence via
    :meth:`locked` or :meth:`get_or_load`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, bytes] = {}

    @contextmanager
    def locked(self) -> Iterator["RuntimeContentCache"]:
        """Hold exclusive access for the duration of the ``with`` block."""
        with self._lock:
            yield self

    def lookup(self, path: str) -> Optional[bytes]:
        with self._lock:
            return self._entries.get(path)

    def insert(self, path: str, data: bytes) -> bytes:
        """Store ``data`` under ``path`` and return the stored object.

        An overwrite replaces the previous entry as a whole.
        """
        stored = bytes(data)
        with self._lock:
            self._entries[path] = stored
        return stored

    def get_or_load(self, path: str, loader: Callable[[], bytes]) -> bytes:
        """Return the cached bytes for ``path``, calling ``loader`` on a miss.

        The lock is held while ``loader`` runs, so concurrent first-time
        requests for the same path perform exactly one load. Exceptions
        from ``loader`` propagate and leave the table unchanged.
        """
        with self._lock:
            cached = self.lookup(path)
            if cached is not None:
                return cached
            return self.insert(path, loader())

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def paths(self) -> list[str]:
        """Snapshot of the cached paths, in insertion order."""
        with self._lock:
            return list(self._entries)


_CONTENT_CACHE: Optional[RuntimeContentCache] = None
_CONTENT_CACHE_LOCK = threading.Lock()


def get_content_cache() -> RuntimeContentCache:
    """Return the process-wide cache, creating it on first call.

    Creation is serialized so that racing first callers all receive the
    same instance.
    """
    global _CONTENT_CACHE

    if _CONTENT_CACHE is None:
        with _CONTENT_CACHE_LOCK:
            if _CONTENT_CACHE is None:
                _CONTENT_CACHE = RuntimeContentCache()
    return _CONTENT_CACHE
