from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

# First character a letter or underscore, then letters, digits, underscores, commas
_EXTENSIONS_PATTERN = re.compile(r"^[a-z_][a-z0-9_,]*$")


class ContainerPageInput(BaseModel):
    """Raw values collected by the configuration page."""

    directory: str
    extensions: str

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("directory must not be empty")
        return v

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("extensions must not be empty")
        if not _EXTENSIONS_PATTERN.match(v):
            raise ValueError(
                f"Invalid extension list: {v!r} (comma separated, lowercase, no dots)"
            )
        return v
