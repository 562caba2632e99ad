"""Build-time embedding of single files.

``embed_file`` is what generated tables call for each file: in production
mode it captures the bytes now, in development mode it only records where
they live, so the first ``contents()`` call reads them from disk.

Paths are normalized lexically; symlinks are not followed, so a file is
keyed by the path it was requested under.
"""

import os
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from embedfile.cache import RuntimeContentCache
from embedfile.config import EmbedConfig, get_active_config
from embedfile.file import EmbeddedFile
from embedfile.metadata import Metadata
from embedfile.resolution.factory import create_resolver

PathLike = Union[str, os.PathLike]


def relative_key(root: Path, target: Path) -> str:
    """Return ``target`` relative to ``root`` with ``/`` separators.

    Raises:
        ValueError: If ``target`` lies outside ``root``.
    """
    try:
        relative = target.relative_to(root)
    except ValueError:
        raise ValueError(f"{target} is not inside the embedding root {root}") from None
    return PurePosixPath(*relative.parts).as_posix()


def embed_file(
    root: PathLike,
    relative_path: PathLike,
    *,
    include_metadata: bool = False,
    config: Optional[EmbedConfig] = None,
    cache: Optional[RuntimeContentCache] = None,
) -> EmbeddedFile:
    """Embed the file at ``root / relative_path``.

    Args:
        root: Directory the embedded paths are relative to.
        relative_path: File to embed, relative to ``root``.
        include_metadata: Attach filesystem timestamps.
        config: Configuration override. Defaults to the active one.
        cache: Cache override for the development strategy.

    Returns:
        An EmbeddedFile keyed by the ``/``-separated relative path.

    Raises:
        ValueError: If the path escapes ``root``.
        OSError: In production mode, if the file cannot be read. With
            ``include_metadata``, if it cannot be stat'ed.
    """
    root_path = Path(os.path.abspath(root))
    file_path = Path(os.path.normpath(root_path / relative_path))
    key = relative_key(root_path, file_path)

    config = config or get_active_config()
    contents = b"" if config.is_development else file_path.read_bytes()
    resolver = create_resolver(
        config,
        contents,
        root_prefix=str(root_path),
        cache=cache,
    )
    embedded = EmbeddedFile(key, contents, str(root_path), resolver=resolver)

    if include_metadata:
        embedded = embedded.with_metadata(Metadata.from_path(file_path))
    return embedded
