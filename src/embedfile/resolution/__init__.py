"""Content-resolution strategies for embedded files.

Provides the ContentResolver base class, the production StaticBytes and
development CachedDiskRead implementations, and a factory that picks one
from configuration.
"""

from embedfile.resolution.base import ContentResolver
from embedfile.resolution.disk import CachedDiskRead
from embedfile.resolution.factory import create_resolver
from embedfile.resolution.static import StaticBytes

__all__ = ["CachedDiskRead", "ContentResolver", "StaticBytes", "create_resolver"]
