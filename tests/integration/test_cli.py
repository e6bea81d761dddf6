"""End-to-end tests for the dirclasspath command line."""

from __future__ import annotations

import json
import subprocess
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

CONTAINER_ID = "org.container.directory.SIMPLE_DIR_CONTAINER"


def _run(
    args: list[str], env: dict[str, str], cwd: Path, timeout: int = 30
) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "dirclasspath", *args],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        timeout=timeout,
        env=env,
        cwd=cwd,
    )


def _log_events(stderr: str) -> list[dict]:
    return [json.loads(line) for line in stderr.splitlines() if line.strip().startswith("{")]


class TestScan:
    def test_prints_entries_as_json(
        self, lib_dir: Path, touch: Callable, subprocess_env: dict[str, str]
    ) -> None:
        touch(lib_dir, "b.jar", "a.jar", "a-src.jar", "notes.txt")

        result = _run(["scan", str(lib_dir), "--extensions", "jar"], subprocess_env, lib_dir)

        assert result.returncode == 0, result.stderr
        payload = json.loads(result.stdout)
        assert payload["extensions"] == ["jar"]
        assert payload["entries"] == [
            {"archive_path": str(lib_dir / "a.jar"), "source_path": str(lib_dir / "a-src.jar")},
            {"archive_path": str(lib_dir / "b.jar"), "source_path": None},
        ]

    def test_missing_directory_is_empty(
        self, tmp_path: Path, subprocess_env: dict[str, str]
    ) -> None:
        result = _run(["scan", str(tmp_path / "nope"), "-e", "jar"], subprocess_env, tmp_path)
        assert result.returncode == 0
        assert json.loads(result.stdout)["entries"] == []

    def test_no_extensions_warns(
        self, lib_dir: Path, touch: Callable, subprocess_env: dict[str, str]
    ) -> None:
        touch(lib_dir, "a.jar", "b.txt")

        result = _run(["scan", str(lib_dir)], subprocess_env, lib_dir)

        assert result.returncode == 0
        assert len(json.loads(result.stdout)["entries"]) == 2
        events = _log_events(result.stderr)
        assert any(e["event"] == "scan_extensions_missing" for e in events)


class TestContainer:
    def test_resolves_container_path(
        self,
        project_root: Path,
        lib_dir: Path,
        touch: Callable,
        subprocess_env: dict[str, str],
    ) -> None:
        touch(lib_dir, "a.zip", "b.jar")

        result = _run(
            ["container", f"{CONTAINER_ID}/lib/jar,zip", "--project-root", str(project_root)],
            subprocess_env,
            project_root,
        )

        assert result.returncode == 0, result.stderr
        payload = json.loads(result.stdout)
        assert payload["description"] == "Directory Classpath: /lib"
        assert [e["archive_path"] for e in payload["entries"]] == [
            str(lib_dir / "a.zip"),
            str(lib_dir / "b.jar"),
        ]

    def test_missing_directory_auto_created(
        self, project_root: Path, subprocess_env: dict[str, str]
    ) -> None:
        result = _run(
            ["container", f"{CONTAINER_ID}/libs/new/jar", "-p", str(project_root)],
            subprocess_env,
            project_root,
        )

        assert result.returncode == 0, result.stderr
        assert (project_root / "libs" / "new").is_dir()
        events = _log_events(result.stderr)
        assert any(
            e["event"] == "container_directory_created" and e["level"] == "warning"
            for e in events
        )

    def test_missing_directory_without_auto_create_fails(
        self, project_root: Path, subprocess_env: dict[str, str]
    ) -> None:
        env = {**subprocess_env, "DIRCLASSPATH__CONTAINER__CREATE_MISSING_DIRS": "false"}

        result = _run(
            ["container", f"{CONTAINER_ID}/missing/jar", "-p", str(project_root)],
            env,
            project_root,
        )

        assert result.returncode == 2
        assert json.loads(result.stdout)["error"]["code"] == "INVALID_CONTAINER"

    def test_malformed_path_fails(
        self, project_root: Path, subprocess_env: dict[str, str]
    ) -> None:
        result = _run(
            ["container", "not.a.container/lib/jar", "-p", str(project_root)],
            subprocess_env,
            project_root,
        )

        assert result.returncode == 2
        error = json.loads(result.stdout)["error"]
        assert error["code"] == "MALFORMED_CONTAINER_PATH"
        assert error["recoverable"] is False


def test_bad_config_type_crashes(tmp_path: Path, subprocess_env: dict[str, str]) -> None:
    """Config validation runs before any command does."""
    env = {**subprocess_env, "DIRCLASSPATH__LOGGING__LEVEL": "LOUD"}
    result = _run(["scan", str(tmp_path)], env, tmp_path)
    assert result.returncode != 0
