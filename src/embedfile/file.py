"""The embedded file value.

An :class:`EmbeddedFile` behaves the same whether its bytes were captured
at embedding time or are read from disk on demand. Which of the two
happens is decided by its :class:`~embedfile.resolution.base.ContentResolver`,
chosen from the process configuration when the file is built.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Optional

from embedfile.cache import RuntimeContentCache
from embedfile.config import get_active_config
from embedfile.metadata import Metadata
from embedfile.resolution.base import ContentResolver
from embedfile.resolution.factory import create_resolver


class EmbeddedFile:
    """A file whose path and contents were embedded into the program.

    Instances are immutable. Building one performs no I/O.

    Args:
        path: Path relative to the embedding root, used as the cache key.
        contents: Bytes captured at embedding time. In development mode they
            are only a placeholder; the file on disk is authoritative.
        root_prefix: Absolute directory the file was embedded from.
            Required in development mode.
        resolver: Explicit strategy. When omitted, one is created from the
            active configuration.
        cache: Cache override for the development strategy.

    Example:
        >>> f = EmbeddedFile("a/b.txt", b"hello")
        >>> f.contents_utf8()
        'hello'
    """

    __slots__ = ("_path", "_contents", "_resolver", "_metadata")

    def __init__(
        self,
        path: str,
        contents: bytes = b"",
        root_prefix: Optional[str] = None,
        *,
        resolver: Optional[ContentResolver] = None,
        cache: Optional[RuntimeContentCache] = None,
    ) -> None:
        if resolver is None:
            resolver = create_resolver(
                get_active_config(), contents, root_prefix, cache=cache
            )
        object.__setattr__(self, "_path", str(path))
        object.__setattr__(self, "_contents", bytes(contents))
        object.__setattr__(self, "_resolver", resolver)
        object.__setattr__(self, "_metadata", None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def path(self) -> Path:
        """The file's path, relative to the directory it was embedded from."""
        return Path(self._path)

    def contents(self) -> bytes:
        """The file's raw contents.

        In development mode the first call reads the file from disk and
        caches it for the rest of the process.

        Raises:
            EmbeddedFileReadError: In development mode, if the file cannot
                be read.
        """
        return self._resolver.resolve(self._path)

    def contents_utf8(self) -> Optional[str]:
        """The file's contents as text, or ``None`` if they are not UTF-8."""
        try:
            return self.contents().decode("utf-8")
        except UnicodeDecodeError:
            return None

    def with_metadata(self, metadata: Metadata) -> EmbeddedFile:
        """Return a copy of this file carrying ``metadata``.

        The receiver is left unchanged; both values share the same resolver.
        """
        clone = object.__new__(type(self))
        object.__setattr__(clone, "_path", self._path)
        object.__setattr__(clone, "_contents", self._contents)
        object.__setattr__(clone, "_resolver", self._resolver)
        object.__setattr__(clone, "_metadata", metadata)
        return clone

    def metadata(self) -> Optional[Metadata]:
        return self._metadata

    @property
    def resolver(self) -> ContentResolver:
        return self._resolver

    @property
    def root_prefix(self) -> Optional[str]:
        return self._resolver.root_prefix

    def _length_label(self) -> str:
        length = self._resolver.cached_length(self._path)
        if length is None:
            length = len(self._contents)
        return f"<{length} bytes>"

    def __rich_repr__(self) -> Iterator[Any]:
        yield "path", self._path
        yield "contents", _Label(self._length_label())
        yield "metadata", self._metadata
        if self._resolver.mode == "development":
            yield "prefix", self.root_prefix

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in self.__rich_repr__()
        )
        return f"{type(self).__name__}({fields})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmbeddedFile):
            return NotImplemented
        if self is other:
            return True
        return (
            self._path == other._path
            and self._metadata == other._metadata
            and self.contents() == other.contents()
        )

    def __hash__(self) -> int:
        return hash(self._path)


class _Label(str):
    """A string that renders without quotes."""

    __slots__ = ()

    def __repr__(self) -> str:
        return str(self)
