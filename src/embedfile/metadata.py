"""Filesystem metadata that can be attached to an embedded file."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from pydantic import BaseModel


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class Metadata(BaseModel):
    """Timestamps captured when a file was embedded.

    Args:
        accessed: Last access time.
        created: Creation time. Platforms without a birth time report the
            last status change instead.
        modified: Last modification time.
    """

    accessed: datetime
    created: datetime
    modified: datetime

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike[str]]) -> Metadata:
        """Read the timestamps of ``path`` from the filesystem.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        stat = Path(path).stat()
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return cls(
            accessed=_timestamp(stat.st_atime),
            created=_timestamp(created),
            modified=_timestamp(stat.st_mtime),
        )
