from __future__ import annotations

from dirclasspath.container import DirectoryContainer
from dirclasspath.errors import DirClasspathError, ErrorCode
from dirclasspath.models import ContainerPath, ContainerStatus, LibraryEntry, ResolverConfig
from dirclasspath.registry import ContainerRegistry
from dirclasspath.resolver import resolve

__all__ = [
    "ContainerPath",
    "ContainerRegistry",
    "ContainerStatus",
    "DirClasspathError",
    "DirectoryContainer",
    "ErrorCode",
    "LibraryEntry",
    "ResolverConfig",
    "resolve",
]
