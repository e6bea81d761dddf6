from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

SOURCE_SUFFIX = "-src"


def _normalise(items: Iterable[str]) -> frozenset[str]:
    return frozenset(item.strip().lstrip(".").lower() for item in items if item.strip(" ."))


def parse_extensions(value: str | None) -> frozenset[str]:
    """Split a comma separated extension list into a normalised set.

    ``"JAR, .zip"`` becomes ``frozenset({"jar", "zip"})``. Blank items are dropped.
    """
    if not value:
        return frozenset()
    return _normalise(value.split(","))


class LibraryEntry(BaseModel):
    """One archive contributed to the classpath, with its optional source archive."""

    model_config = ConfigDict(frozen=True)

    archive_path: Path
    source_path: Path | None = None


class ResolverConfig(BaseModel):
    """Directory to scan and the extensions to accept.

    An empty ``extensions`` set means every extensioned file is accepted.
    """

    model_config = ConfigDict(frozen=True)

    directory: Path
    extensions: frozenset[str] = frozenset()

    @field_validator("extensions", mode="before")
    @classmethod
    def normalise_extensions(cls, v: object) -> object:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return parse_extensions(v)
        if isinstance(v, (list, tuple, set, frozenset)):
            return _normalise(str(ext) for ext in v)
        return v

    @property
    def permissive(self) -> bool:
        return not self.extensions
