"""Base abstract class for content-resolution strategies.

An ``EmbeddedFile`` delegates every content access to one of these, so the
production/development switch lives in exactly one place instead of being
branched on inside each accessor.
"""

from abc import ABC, abstractmethod
from typing import Optional

from embedfile.config import Mode


class ContentResolver(ABC):
    """Interface implemented by every content-resolution strategy."""

    __slots__ = ()

    mode: Mode

    @abstractmethod
    def resolve(self, path: str) -> bytes:
        """Return the contents for the embedded file at ``path``.

        Args:
            path: The file's path relative to its embedding root.

        Returns:
            The file's raw bytes. Repeated calls return identical bytes.
        """
        ...

    @abstractmethod
    def cached_length(self, path: str) -> Optional[int]:
        """Return the content length if it is known without any I/O.

        Args:
            path: The file's path relative to its embedding root.

        Returns:
            Number of bytes, or ``None`` when only a read could tell.
        """
        ...

    @property
    def root_prefix(self) -> Optional[str]:
        """Directory the file was embedded from, when the strategy needs it."""
        return None
