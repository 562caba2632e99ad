"""Embedded files that can be served from memory or re-read from disk.

In production mode an :class:`EmbeddedFile` returns the bytes captured when
it was embedded. In development mode it reads the file from disk on first
access and memoizes it for the rest of the process, so edits made before
startup are picked up without re-embedding.
"""

from embedfile._version import __version__
from embedfile.cache import RuntimeContentCache, get_content_cache
from embedfile.config import EmbedConfig, get_active_config, load_config
from embedfile.embed import embed_file
from embedfile.exceptions import EmbeddedFileReadError
from embedfile.file import EmbeddedFile
from embedfile.metadata import Metadata
from embedfile.resolution import (
    CachedDiskRead,
    ContentResolver,
    StaticBytes,
    create_resolver,
)

__all__ = [
    "__version__",
    "CachedDiskRead",
    "ContentResolver",
    "EmbedConfig",
    "EmbeddedFile",
    "EmbeddedFileReadError",
    "Metadata",
    "RuntimeContentCache",
    "StaticBytes",
    "create_resolver",
    "embed_file",
    "get_active_config",
    "get_content_cache",
    "load_config",
]
