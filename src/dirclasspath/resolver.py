"""Directory scan: turn a directory and an extension set into library entries.

Resolution is best-effort. A missing directory yields no entries, and
``OSError`` raised while listing the directory or probing a single file is
logged with ``exc_info=True`` and skipped. Filesystem errors never leave
``resolve``, because one unreadable file must not hide the rest of the
directory from the classpath.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from dirclasspath.models.entries import SOURCE_SUFFIX, LibraryEntry, parse_extensions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger

    from dirclasspath.models.entries import ResolverConfig

log = structlog.get_logger()


def split_name(name: str) -> tuple[str, str] | None:
    """Split a file name at its last dot.

    ``foo.release.jar`` gives ``("foo.release", "jar")``; a name without a dot
    gives ``None``.
    """
    index = name.rfind(".")
    if index == -1:
        return None
    return name[:index], name[index + 1 :]


def accepts(name: str, extensions: frozenset[str]) -> bool:
    """Inclusion filter for primary entries.

    ``-src`` archives are never primary entries, they only ever show up as
    the source attachment of another entry.
    """
    parts = split_name(name)
    if parts is None:
        return False
    base, ext = parts
    if base.endswith(SOURCE_SUFFIX):
        return False
    if not extensions:
        return True
    return ext.lower() in extensions


def source_candidate(archive: Path) -> Path | None:
    """Path where the companion source archive of ``archive`` would live.

    Only the final ``.ext`` is replaced, so ``foo.jar-backup.jar`` probes
    ``foo.jar-backup-src.jar``.
    """
    parts = split_name(archive.name)
    if parts is None:
        return None
    base, ext = parts
    return archive.with_name(f"{base}{SOURCE_SUFFIX}.{ext}")


def _is_dir(directory: Path, logger: FilteringBoundLogger) -> bool:
    try:
        return directory.is_dir()
    except OSError:
        logger.error("resolve_stat_error", directory=str(directory), exc_info=True)
        return False


def _list_candidates(
    directory: Path, extensions: frozenset[str], logger: FilteringBoundLogger
) -> list[Path]:
    candidates: list[Path] = []
    with os.scandir(directory) as it:
        for dir_entry in it:
            if not accepts(dir_entry.name, extensions):
                continue
            try:
                if not dir_entry.is_file():
                    continue
            except OSError:
                logger.error("resolve_stat_error", path=dir_entry.path, exc_info=True)
                continue
            candidates.append(directory / dir_entry.name)
    return candidates


def resolve(
    directory: str | os.PathLike[str],
    extensions: str | Iterable[str] | None = None,
    *,
    logger: FilteringBoundLogger | None = None,
) -> list[LibraryEntry]:
    """Return the library entries of ``directory``, sorted by archive path.

    ``extensions`` are matched case-insensitively and may also be a comma
    separated string such as ``"jar,zip"``; an empty or missing set accepts
    every file that has an extension.
    """
    logger = logger or log
    directory = Path(directory).absolute()
    if isinstance(extensions, str):
        exts = parse_extensions(extensions)
    else:
        exts = frozenset(ext.lower() for ext in extensions or ())

    if not _is_dir(directory, logger):
        return []

    try:
        candidates = _list_candidates(directory, exts, logger)
    except OSError:
        logger.error("resolve_list_error", directory=str(directory), exc_info=True)
        return []

    entries: list[LibraryEntry] = []
    for archive in sorted(candidates, key=str):
        source = source_candidate(archive)
        try:
            source_path = source if source is not None and source.exists() else None
        except OSError:
            logger.error("resolve_probe_error", archive=str(archive), exc_info=True)
            continue
        entries.append(LibraryEntry(archive_path=archive, source_path=source_path))

    logger.debug("resolve_complete", directory=str(directory), entries=len(entries))
    return entries


def resolve_config(
    config: ResolverConfig, *, logger: FilteringBoundLogger | None = None
) -> list[LibraryEntry]:
    return resolve(config.directory, config.extensions, logger=logger)
