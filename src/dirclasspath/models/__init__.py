from __future__ import annotations

from dirclasspath.models.container import (
    CONTAINER_ID,
    ROOT_DIR,
    ContainerPath,
    ContainerStatus,
)
from dirclasspath.models.entries import (
    SOURCE_SUFFIX,
    LibraryEntry,
    ResolverConfig,
    parse_extensions,
)

__all__ = [
    # entries
    "LibraryEntry",
    "ResolverConfig",
    "SOURCE_SUFFIX",
    "parse_extensions",
    # container
    "ContainerPath",
    "ContainerStatus",
    "CONTAINER_ID",
    "ROOT_DIR",
]
