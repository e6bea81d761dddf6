"""Browser filter hiding files that an installed container already contributes.

Without it a user could add the same archive to the classpath twice, once
through the container and once by hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import os

    from dirclasspath.registry import ContainerRegistry


class ContainerDirFilter:
    def __init__(self, registry: ContainerRegistry) -> None:
        self._registry = registry

    def select(self, file: str | os.PathLike[str]) -> bool:
        """``False`` when ``file`` should be hidden from the browser."""
        return not self._registry.is_contained(file)
