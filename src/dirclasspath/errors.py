"""Error types surfaced to callers.

Only configuration problems cross the package boundary as exceptions.
Filesystem failures during resolution are logged and skipped instead.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_EXTENSIONS = "INVALID_EXTENSIONS"
    DIRECTORY_OUTSIDE_PROJECT = "DIRECTORY_OUTSIDE_PROJECT"
    MALFORMED_CONTAINER_PATH = "MALFORMED_CONTAINER_PATH"
    INVALID_CONTAINER = "INVALID_CONTAINER"


class DirClasspathError(Exception):
    """Validation failure with a machine-readable code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str = "",
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }
