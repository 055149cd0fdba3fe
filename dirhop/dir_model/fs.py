"""Filesystem scanning for one-level directory snapshots."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import InvalidPathError, UnreadableDirectoryError
from .types import DirectoryEntry, DirectorySnapshot

logger = logging.getLogger(__name__)


def display_name(path: Path) -> str:
    """Return the final component of ``path`` as printable text.

    Raises ``InvalidPathError`` when the path has no final component, such as
    a filesystem root. Undecodable bytes are shown as replacement characters.
    """
    name = path.name
    if not name:
        raise InvalidPathError(path)
    return name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def parent_path(path: Path) -> Path:
    """Return the parent of ``path``; a filesystem root is its own parent."""
    return path.parent


def is_filesystem_root(path: Path) -> bool:
    return path.parent == path


def _absolute(path: Path) -> Path:
    """Make ``path`` absolute without following symlinks in it."""
    try:
        return Path(os.path.normpath(path.absolute()))
    except OSError as exc:
        raise UnreadableDirectoryError(path, exc.strerror or str(exc)) from exc


def load_snapshot(path: Path) -> DirectorySnapshot:
    """Read the direct children of ``path`` into a new snapshot.

    Children are partitioned with ``DirEntry.is_dir()``, which follows
    symlinks; anything that is not a directory is listed as a file. A child
    whose type cannot be read, or whose name cannot be extracted, is skipped.
    Raises ``UnreadableDirectoryError`` when ``path`` itself cannot be listed.
    """
    root = _absolute(path)
    subdirectories: list[DirectoryEntry] = []
    files: list[str] = []

    try:
        with os.scandir(root) as entries:
            for child in entries:
                child_path = root / child.name
                try:
                    name = display_name(child_path)
                except InvalidPathError:
                    logger.warning("Skipping entry without a name in %s: %r", root, child.path)
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError as exc:
                    logger.warning("Skipping unreadable entry %s: %s", child_path, exc)
                    continue

                if is_dir:
                    subdirectories.append(DirectoryEntry(path=child_path, name=name))
                else:
                    files.append(name)
    except OSError as exc:
        logger.debug("Listing %s failed", root, exc_info=True)
        raise UnreadableDirectoryError(root, exc.strerror or str(exc)) from exc

    logger.debug(
        "Loaded %s: %d directories, %d files",
        root,
        len(subdirectories),
        len(files),
    )
    return DirectorySnapshot(
        path=root,
        subdirectories=tuple(subdirectories),
        files=tuple(files),
    )


__all__ = [
    "display_name",
    "parent_path",
    "is_filesystem_root",
    "load_snapshot",
]
