"""Exceptions raised by embedfile."""

from typing import Optional


class EmbeddedFileReadError(OSError):
    """Raised when a development-mode file cannot be read from disk.

    Attributes:
        path: The embedded (relative) path that was requested.
        real_path: The on-disk location that was attempted.
    """

    def __init__(
        self,
        message: str,
        path: str,
        real_path: str,
        errno: Optional[int] = None,
    ) -> None:
        if errno is None:
            super().__init__(message)
        else:
            super().__init__(errno, message)
        self.path = path
        self.real_path = real_path

    def __str__(self) -> str:
        if self.errno is None:
            return super().__str__()
        return str(self.strerror)
