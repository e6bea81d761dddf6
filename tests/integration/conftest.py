"""Integration test fixtures.

CLI tests run ``python -m dirclasspath`` in a subprocess with a clean
environment, so neither the developer's dirclasspath.yaml nor their
DIRCLASSPATH__* variables leak in.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    env = {k: v for k, v in os.environ.items() if not k.startswith("DIRCLASSPATH__")}
    env["DIRCLASSPATH__LOGGING__FORMAT"] = "json"
    env["DIRCLASSPATH__LOGGING__LEVEL"] = "INFO"
    # platformdirs honours XDG_CONFIG_HOME on Linux
    env["XDG_CONFIG_HOME"] = str(tmp_path / "xdg-config")
    return env
