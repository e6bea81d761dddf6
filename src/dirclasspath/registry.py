"""Container registry: the owner side of the replace-on-change protocol.

The registry installs containers for a project, swaps in the replacement a
stale container hands over, and answers "is this file already on the
classpath" for the browser filter.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from dirclasspath.config import Settings
from dirclasspath.container import DirectoryContainer
from dirclasspath.errors import DirClasspathError, ErrorCode
from dirclasspath.models.container import ContainerPath
from dirclasspath.models.entries import ResolverConfig

if TYPE_CHECKING:
    import os

    from structlog.typing import FilteringBoundLogger

    from dirclasspath.models.entries import LibraryEntry

log = structlog.get_logger()


def _as_path(path: ContainerPath | str) -> ContainerPath:
    return ContainerPath.parse(path) if isinstance(path, str) else path


class ContainerRegistry:
    """Installed containers of one project, keyed by container path."""

    def __init__(
        self,
        project_root: str | os.PathLike[str],
        settings: Settings | None = None,
        *,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self._root = Path(project_root).resolve()
        self._settings = settings or Settings()
        self._logger = logger
        self._log = logger or log
        self._containers: dict[ContainerPath, DirectoryContainer] = {}

    @property
    def project_root(self) -> Path:
        return self._root

    def container_directory(self, path: ContainerPath) -> Path:
        """Absolute directory of ``path``; created with a warning if missing."""
        directory = path.resolve_directory(self._root)
        if not directory.exists() and self._settings.container.create_missing_dirs:
            self._log.warning(
                "container_directory_created",
                path=str(path),
                directory=str(directory),
            )
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError:
                self._log.error(
                    "container_directory_create_error", directory=str(directory), exc_info=True
                )
        return directory

    def initialize(self, path: ContainerPath | str) -> DirectoryContainer | None:
        """Build and install the container for ``path``.

        An invalid container (directory missing or not a directory) is not
        installed; a warning is logged and ``None`` returned.
        """
        path = _as_path(path)
        config = ResolverConfig(
            directory=self.container_directory(path),
            extensions=path.extensions or frozenset(),
        )
        container = DirectoryContainer(
            config,
            path=path,
            request_update=self.request_update,
            logger=self._logger,
        )
        if not container.is_valid():
            self._log.warning(
                "container_invalid", path=str(path), directory=str(config.directory)
            )
            return None

        self._containers[path] = container
        self._log.info("container_installed", path=str(path), directory=str(config.directory))
        return container

    def request_update(self, old: DirectoryContainer, replacement: DirectoryContainer) -> None:
        """Swap ``replacement`` in for ``old`` if ``old`` is still installed."""
        key = old.path
        if key is None or self._containers.get(key) is not old:
            self._log.debug("container_update_ignored", path=str(key))
            return
        self._containers[key] = replacement
        self._log.info("container_replaced", path=str(key))

    def get(self, path: ContainerPath | str) -> DirectoryContainer | None:
        return self._containers.get(_as_path(path))

    def remove(self, path: ContainerPath | str) -> DirectoryContainer | None:
        return self._containers.pop(_as_path(path), None)

    def containers(self) -> list[DirectoryContainer]:
        return list(self._containers.values())

    def entries(self, path: ContainerPath | str) -> list[LibraryEntry]:
        """Current entries of an installed container.

        Reading may trigger a replacement; the entries returned are the ones
        the container held when it was read.
        """
        container = self.get(path)
        if container is None:
            raise DirClasspathError(
                ErrorCode.INVALID_CONTAINER,
                f"No container installed for {str(path)!r}",
                suggestion="Call initialize() first",
                recoverable=True,
            )
        return container.current_entries()

    def is_contained(self, file: str | os.PathLike[str]) -> bool:
        return any(container.is_member(file) for container in self._containers.values())
