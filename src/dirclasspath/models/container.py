"""Container identity: the structured path value and the lifecycle status.

A container path is stored by the host project model in one of two forms:

  legacy     ``<container-id>/<relative-dir...>/<ext-list>``, with ``*`` as
             the ext list when none is configured
  attribute  ``<container-id>/<project>/<relative-dir...>`` plus an
             ``extensions`` attribute holding the ext list

``-`` as the relative directory stands for the project root.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from dirclasspath.errors import DirClasspathError, ErrorCode
from dirclasspath.models.entries import _normalise, parse_extensions

CONTAINER_ID = "org.container.directory.SIMPLE_DIR_CONTAINER"
ROOT_DIR = "-"
EXTENSIONS_ATTRIBUTE = "extensions"
NO_EXTENSIONS = "*"


class ContainerStatus(StrEnum):
    INITIALIZING = "Initializing"
    IN_USE = "InUse"
    UPDATE_REQUESTED = "UpdateRequested"


def _segments(value: str) -> list[str]:
    segments = [s for s in value.strip().split("/") if s]
    if not segments or segments[0] != CONTAINER_ID:
        raise DirClasspathError(
            ErrorCode.MALFORMED_CONTAINER_PATH,
            f"Not a directory container path: {value!r}",
            suggestion=f"Container paths start with {CONTAINER_ID}",
        )
    if ".." in segments:
        raise DirClasspathError(
            ErrorCode.MALFORMED_CONTAINER_PATH,
            f"Container path must not leave the project: {value!r}",
        )
    return segments


class ContainerPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    container_id: str = CONTAINER_ID
    relative_dir: str = ROOT_DIR
    # None: no extension list was stored, the permissive fallback applies
    extensions: frozenset[str] | None = None

    @field_validator("extensions", mode="before")
    @classmethod
    def normalise_extensions(cls, v: object) -> object:
        if v is None:
            return None
        if isinstance(v, str):
            return parse_extensions(v) or None
        if isinstance(v, (list, tuple, set, frozenset)):
            return _normalise(str(ext) for ext in v) or None
        return v

    @classmethod
    def parse(cls, value: str) -> ContainerPath:
        """Decode the legacy form.

        ``*`` as the last segment, or a bare ``<id>/<dir>``, means no extensions.
        """
        segments = _segments(value)
        if len(segments) < 2:
            raise DirClasspathError(
                ErrorCode.MALFORMED_CONTAINER_PATH,
                f"Container path has no directory segment: {value!r}",
            )
        if len(segments) == 2:
            return cls(relative_dir=segments[1])
        if segments[-1] == NO_EXTENSIONS:
            return cls(relative_dir="/".join(segments[1:-1]))

        extensions = parse_extensions(segments[-1])
        if not extensions:
            raise DirClasspathError(
                ErrorCode.MALFORMED_CONTAINER_PATH,
                f"Container path has an empty extension list: {value!r}",
            )
        return cls(relative_dir="/".join(segments[1:-1]), extensions=extensions)

    @classmethod
    def from_attribute_form(cls, value: str, attributes: Mapping[str, str]) -> ContainerPath:
        """Decode the attribute form; the project segment is dropped."""
        segments = _segments(value)
        if len(segments) < 2:
            raise DirClasspathError(
                ErrorCode.MALFORMED_CONTAINER_PATH,
                f"Container path has no project segment: {value!r}",
            )
        relative_dir = "/".join(segments[2:]) or ROOT_DIR

        raw: str | None = None
        for key, attr_value in attributes.items():
            if key.lower() == EXTENSIONS_ATTRIBUTE:
                raw = attr_value
        extensions = parse_extensions(raw) if raw is not None else None
        return cls(relative_dir=relative_dir, extensions=extensions or None)

    @property
    def is_root(self) -> bool:
        return self.relative_dir == ROOT_DIR

    @property
    def extension_list(self) -> str:
        return ",".join(sorted(self.extensions or ()))

    @property
    def description(self) -> str:
        """User-facing label, e.g. ``Directory Classpath: /lib``."""
        return "Directory Classpath: /" + ("" if self.is_root else self.relative_dir)

    def resolve_directory(self, project_root: Path) -> Path:
        root = project_root.resolve()
        return root if self.is_root else root / self.relative_dir

    def __str__(self) -> str:
        return f"{self.container_id}/{self.relative_dir}/{self.extension_list or NO_EXTENSIONS}"
