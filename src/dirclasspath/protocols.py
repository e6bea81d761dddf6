"""Host-facing capabilities.

A host build tool talks to directory containers only through these
protocols, so nothing in the core imports host types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import os
    from pathlib import Path

    from dirclasspath.models.container import ContainerPath
    from dirclasspath.models.entries import LibraryEntry


@runtime_checkable
class ClasspathContributor(Protocol):
    @property
    def path(self) -> ContainerPath | None: ...

    @property
    def description(self) -> str: ...

    @property
    def directory(self) -> Path: ...

    def current_entries(self) -> list[LibraryEntry]: ...

    def is_member(self, file: str | os.PathLike[str]) -> bool: ...


@runtime_checkable
class ConfigurationPage(Protocol):
    def set_selection(self, path: ContainerPath | str | None) -> None: ...

    def initial_directory(self) -> str: ...

    def initial_extensions(self) -> str: ...

    def finish(self, directory: str, extensions: str) -> ContainerPath: ...
