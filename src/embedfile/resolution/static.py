"""Production strategy: serve bytes captured at embedding time."""

from typing import Optional

from embedfile.config import Mode
from embedfile.resolution.base import ContentResolver


class StaticBytes(ContentResolver):
    """Returns the embedded bytes directly; no I/O, no shared state."""

    mode: Mode = "production"

    __slots__ = ("_contents",)

    def __init__(self, contents: bytes) -> None:
        self._contents = bytes(contents)

    def resolve(self, path: str) -> bytes:
        return self._contents

    def cached_length(self, path: str) -> Optional[int]:
        return len(self._contents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticBytes):
            return NotImplemented
        return self._contents == other._contents

    def __hash__(self) -> int:
        return hash(self._contents)

    def __repr__(self) -> str:
        return f"StaticBytes(<{len(self._contents)} bytes>)"
