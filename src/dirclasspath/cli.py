"""
CLI entry point for dirclasspath.

Usage:
    dirclasspath scan <dir> [--extensions jar,zip]
        Resolve a directory and print its library entries
    dirclasspath container <path> --project-root <root>
        Decode a container path, install it and print its entries

Results go to stdout as JSON, logs to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import structlog

from dirclasspath.config import Settings
from dirclasspath.errors import DirClasspathError, ErrorCode
from dirclasspath.logging_config import configure_logging
from dirclasspath.models.entries import LibraryEntry, parse_extensions
from dirclasspath.registry import ContainerRegistry
from dirclasspath.resolver import resolve

log = structlog.get_logger()


def _dump(payload: dict[str, object]) -> None:
    print(json.dumps(payload, indent=2))


def _entries_payload(entries: list[LibraryEntry]) -> list[dict[str, object]]:
    return [entry.model_dump(mode="json") for entry in entries]


def cmd_scan(args: argparse.Namespace, settings: Settings) -> int:
    """Resolve a directory and print its entries."""
    extensions = parse_extensions(args.extensions)
    if not extensions:
        log.warning("scan_extensions_missing", directory=args.directory)
    entries = resolve(Path(args.directory), extensions)
    _dump(
        {
            "directory": str(Path(args.directory).absolute()),
            "extensions": sorted(extensions),
            "entries": _entries_payload(entries),
        }
    )
    return 0


def cmd_container(args: argparse.Namespace, settings: Settings) -> int:
    """Install a container from its path and print its entries."""
    registry = ContainerRegistry(args.project_root, settings)
    container = registry.initialize(args.path)
    if container is None:
        raise DirClasspathError(
            ErrorCode.INVALID_CONTAINER,
            f"Container directory is not usable: {args.path!r}",
        )
    _dump(
        {
            "path": str(container.path),
            "description": container.description,
            "directory": str(container.directory),
            "entries": _entries_payload(container.current_entries()),
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirclasspath",
        description="Resolve a directory of archives into classpath library entries.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Resolve a directory")
    scan.add_argument("directory", help="Directory to scan")
    scan.add_argument(
        "--extensions",
        "-e",
        default=None,
        help="Comma separated extensions, e.g. jar,zip (default: all files)",
    )
    scan.set_defaults(func=cmd_scan)

    container = subparsers.add_parser("container", help="Resolve a container path")
    container.add_argument("path", help="Container path, e.g. <id>/lib/jar,zip")
    container.add_argument("--project-root", "-p", default=".", help="Project root directory")
    container.set_defaults(func=cmd_container)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(settings.logging)

    try:
        return args.func(args, settings)
    except DirClasspathError as exc:
        log.error("command_failed", code=exc.code.value, message=exc.message)
        _dump(exc.to_dict())
        return 2


if __name__ == "__main__":
    sys.exit(main())
