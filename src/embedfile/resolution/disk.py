"""Development strategy: read from disk once, then serve from the cache.

The real location of a file is ``root_prefix + os.sep + path``. The first
access for a path reads the whole file and stores it in the shared
:class:`~embedfile.cache.RuntimeContentCache`; every later access in the
process returns the stored bytes, even if the file changed on disk.

The cache lock is held across the read itself. Two threads racing on the
same new path therefore cause a single read, at the cost of serializing
first-time reads of unrelated files.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from embedfile.cache import RuntimeContentCache, get_content_cache
from embedfile.config import Mode
from embedfile.exceptions import EmbeddedFileReadError
from embedfile.resolution.base import ContentResolver
from embedfile.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.WARNING)

Reader = Callable[[Path], bytes]


def _read_file(real_path: Path) -> bytes:
    return real_path.read_bytes()


class CachedDiskRead(ContentResolver):
    """Resolves contents from the filesystem through a process-wide cache.

    Args:
        root_prefix: Absolute directory the file was embedded from.
        cache: Cache to consult. Defaults to the process-wide instance,
            looked up at resolution time.
        reader: Callable that reads a whole file. Defaults to
            ``Path.read_bytes``.
    """

    mode: Mode = "development"

    __slots__ = ("_root_prefix", "_cache", "_reader")

    def __init__(
        self,
        root_prefix: str,
        cache: Optional[RuntimeContentCache] = None,
        reader: Optional[Reader] = None,
    ) -> None:
        self._root_prefix = str(root_prefix)
        self._cache = cache
        self._reader = reader or _read_file

    @property
    def root_prefix(self) -> str:
        return self._root_prefix

    @property
    def cache(self) -> RuntimeContentCache:
        return self._cache if self._cache is not None else get_content_cache()

    def real_path(self, path: str) -> Path:
        """Location of ``path`` on disk, joined with the platform separator."""
        return Path(self._root_prefix + os.sep + path)

    def resolve(self, path: str) -> bytes:
        """Return cached bytes for ``path``, reading the file on first access.

        Raises:
            EmbeddedFileReadError: If the file cannot be read. Nothing is
                cached and the next call will try again.
        """
        real_path = self.real_path(path)

        def load() -> bytes:
            try:
                data = self._reader(real_path)
            except OSError as exc:
                raise EmbeddedFileReadError(
                    f"Could not read embedded file '{path}' from {real_path}: "
                    f"{exc.strerror or exc}",
                    path=path,
                    real_path=str(real_path),
                    errno=exc.errno,
                ) from exc
            logger.debug(f"Loaded [bold]{path}[/bold] ({len(data)} bytes) into cache")
            return data

        return self.cache.get_or_load(path, load)

    def cached_length(self, path: str) -> Optional[int]:
        cached = self.cache.lookup(path)
        return None if cached is None else len(cached)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CachedDiskRead):
            return NotImplemented
        return (
            self._root_prefix == other._root_prefix
            and self.cache is other.cache
        )

    def __hash__(self) -> int:
        return hash(self._root_prefix)

    def __repr__(self) -> str:
        return f"CachedDiskRead(root_prefix={self._root_prefix!r})"
