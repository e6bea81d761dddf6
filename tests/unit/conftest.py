"""Unit-specific fixtures (filesystem I/O confined to tmp_path)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dirclasspath.config import ContainerSettings, Settings
from dirclasspath.models.entries import ResolverConfig
from dirclasspath.registry import ContainerRegistry

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def jar_config(lib_dir: Path) -> ResolverConfig:
    return ResolverConfig(directory=lib_dir, extensions=frozenset({"jar"}))


@pytest.fixture()
def registry(project_root: Path) -> ContainerRegistry:
    return ContainerRegistry(project_root, Settings(container=ContainerSettings()))
