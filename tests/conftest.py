"""Shared fixtures: throwaway library directories under tmp_path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def lib_dir(project_root: Path) -> Path:
    directory = project_root / "lib"
    directory.mkdir()
    return directory


@pytest.fixture()
def touch() -> Callable[..., list[Path]]:
    """Create empty files in a directory: ``touch(lib_dir, "a.jar", "b.jar")``."""

    def _touch(directory: Path, *names: str) -> list[Path]:
        created = []
        for name in names:
            path = directory / name
            path.write_bytes(b"")
            created.append(path)
        return created

    return _touch
