"""Headless configuration page for a directory container.

Collects a directory and an extension list, validates both and turns them
into a ``ContainerPath``. Rendering the form is left to the host.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from dirclasspath.config import Settings
from dirclasspath.errors import DirClasspathError, ErrorCode
from dirclasspath.models.container import ROOT_DIR, ContainerPath
from dirclasspath.models.entries import parse_extensions
from dirclasspath.models.page import ContainerPageInput

if TYPE_CHECKING:
    import os

    from dirclasspath.registry import ContainerRegistry


class ContainerPage:
    def __init__(
        self,
        project_root: str | os.PathLike[str],
        registry: ContainerRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._root = Path(project_root).resolve()
        self._registry = registry
        self._settings = settings or Settings()
        self._selection: ContainerPath | None = None

    def set_selection(self, path: ContainerPath | str | None) -> None:
        """Pre-fill the page from an existing container (``None`` for a new one)."""
        if isinstance(path, str):
            path = ContainerPath.parse(path)
        self._selection = path

    def initial_directory(self) -> str:
        if self._selection is None:
            return str(self._root)
        return str(self._selection.resolve_directory(self._root))

    def initial_extensions(self) -> str:
        """Extensions of the selected container, else the configured default."""
        if self._selection is None:
            return self._settings.container.default_extensions

        if self._registry is not None:
            installed = self._registry.get(self._selection)
            if installed is not None and installed.config.extensions:
                return ",".join(sorted(installed.config.extensions))

        if self._selection.extensions:
            return self._selection.extension_list
        return self._settings.container.default_extensions

    def relative_directory(self, directory: str) -> str:
        """Project-relative form of ``directory`` (``-`` for the root itself).

        Raises ``DirClasspathError`` when the directory lies outside the project.
        """
        candidate = Path(directory)
        if not candidate.is_absolute():
            candidate = self._root / candidate
        candidate = candidate.resolve()

        if candidate != self._root and self._root not in candidate.parents:
            raise DirClasspathError(
                ErrorCode.DIRECTORY_OUTSIDE_PROJECT,
                f"Directory {str(candidate)!r} is not inside project {self._root.name!r}",
                suggestion=f"Choose a directory under {self._root}",
                recoverable=True,
            )
        relative = candidate.relative_to(self._root).as_posix()
        return ROOT_DIR if relative in ("", ".") else relative

    def finish(self, directory: str, extensions: str) -> ContainerPath:
        """Validate the page input and build the container path it describes."""
        try:
            page_input = ContainerPageInput(directory=directory, extensions=extensions)
        except ValidationError as exc:
            first = exc.errors()[0]
            code = (
                ErrorCode.INVALID_EXTENSIONS
                if first["loc"] and first["loc"][0] == "extensions"
                else ErrorCode.INVALID_CONTAINER
            )
            raise DirClasspathError(code, first["msg"], recoverable=True) from exc

        return ContainerPath(
            relative_dir=self.relative_directory(page_input.directory),
            extensions=parse_extensions(page_input.extensions) or None,
        )
