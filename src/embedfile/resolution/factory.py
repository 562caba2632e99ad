"""Factory for content-resolution strategies.

Maps an :class:`~embedfile.config.EmbedConfig` onto the matching
:class:`~embedfile.resolution.base.ContentResolver` implementation.
"""

from typing import Optional

from embedfile.cache import RuntimeContentCache
from embedfile.config import EmbedConfig
from embedfile.resolution.base import ContentResolver
from embedfile.resolution.disk import CachedDiskRead
from embedfile.resolution.static import StaticBytes


def create_resolver(
    config: EmbedConfig,
    contents: bytes,
    root_prefix: Optional[str] = None,
    cache: Optional[RuntimeContentCache] = None,
) -> ContentResolver:
    """Create the resolver selected by ``config``.

    Args:
        config: Active configuration.
        contents: Bytes captured at embedding time. Ignored in development
            mode, where the file on disk is authoritative.
        root_prefix: Directory the file was embedded from.
        cache: Optional cache override for the development strategy.

    Returns:
        StaticBytes in production mode, CachedDiskRead in development mode.

    Raises:
        ValueError: If development mode is selected without a root prefix.
    """
    if config.mode == "production":
        return StaticBytes(contents)

    if config.mode == "development":
        if root_prefix is None:
            raise ValueError(
                "Development mode reads files from disk and needs the "
                "directory they were embedded from. Pass root_prefix, or "
                "set EMBEDFILE_MODE=production."
            )
        return CachedDiskRead(root_prefix, cache=cache)

    raise ValueError(
        f"Unsupported resolution mode: {config.mode}. "
        "Supported modes: production, development"
    )
