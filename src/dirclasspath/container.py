"""Directory container: cached entries plus staleness detection.

A container is immutable from its owner's point of view. When a re-scan
shows that the directory changed, the container does not refresh itself;
it hands a freshly built replacement to the ``request_update`` callback and
the owner swaps the reference. Until then it keeps serving the old list.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from dirclasspath.errors import DirClasspathError
from dirclasspath.models.container import ContainerStatus
from dirclasspath.resolver import resolve_config, split_name

if TYPE_CHECKING:
    import os

    from structlog.typing import FilteringBoundLogger

    from dirclasspath.models.container import ContainerPath
    from dirclasspath.models.entries import LibraryEntry, ResolverConfig

log = structlog.get_logger()

UpdateRequester = Callable[["DirectoryContainer", "DirectoryContainer"], None]


class DirectoryContainer:
    """Classpath contributor backed by a single directory."""

    def __init__(
        self,
        config: ResolverConfig,
        *,
        path: ContainerPath | None = None,
        request_update: UpdateRequester | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self._status = ContainerStatus.INITIALIZING
        self._config = config
        self._path = path
        self._request_update = request_update
        self._logger = logger
        self._log = (logger or log).bind(directory=str(config.directory))
        self._directory = config.directory.absolute()

        if config.permissive:
            self._log.warning("container_extensions_missing")

        self._entries: tuple[LibraryEntry, ...] = tuple(resolve_config(config, logger=self._log))
        self._status = ContainerStatus.IN_USE

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def status(self) -> ContainerStatus:
        return self._status

    @property
    def path(self) -> ContainerPath | None:
        return self._path

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def description(self) -> str:
        if self._path is not None:
            return self._path.description
        return f"Directory Classpath: {self._directory}"

    def is_valid(self) -> bool:
        """True when the configured directory exists and is a directory."""
        return self._directory.is_dir()

    def is_stale(self) -> bool:
        """Re-scan the directory and compare against the cached entries.

        A changed count is stale. With the same count, any difference in
        membership is stale too, e.g. a version bump that renames one archive.
        """
        fresh = resolve_config(self._config, logger=self._log)
        if len(fresh) != len(self._entries):
            return True
        return bool(set(self._entries) ^ set(fresh))

    def current_entries(self) -> list[LibraryEntry]:
        """Return the cached entries, requesting a replacement first if stale.

        Only the first detected change triggers a request; afterwards the
        stale list is served as-is until the owner swaps this instance out.
        """
        if self._status is not ContainerStatus.UPDATE_REQUESTED and self.is_stale():
            self._status = ContainerStatus.UPDATE_REQUESTED
            self._log.info("container_update_requested", path=str(self._path))
            if self._request_update is not None:
                try:
                    self._request_update(self, self.rebuild())
                except (DirClasspathError, OSError):
                    self._log.error("container_update_error", exc_info=True)
        return list(self._entries)

    def rebuild(self) -> DirectoryContainer:
        """Construct a fresh container against the same configuration."""
        return type(self)(
            self._config,
            path=self._path,
            request_update=self._request_update,
            logger=self._logger,
        )

    def is_member(self, file: str | os.PathLike[str]) -> bool:
        """Whether ``file`` would be picked up by this container.

        Used to hide files from a project browser that are already on the
        classpath through this container.
        """
        file = Path(file).absolute()
        if file.parent != self._directory:
            return False
        parts = split_name(file.name)
        if parts is None:
            return False
        return parts[1].lower() in self._config.extensions

    def __repr__(self) -> str:
        return (
            f"DirectoryContainer(path={str(self._path)!r}, directory={str(self._directory)!r}, "
            f"extensions={sorted(self._config.extensions)!r}, status={self._status.value!r})"
        )
