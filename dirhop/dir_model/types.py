"""Domain datatypes for one-level directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """Navigable child directory: absolute path plus its display name."""

    path: Path
    name: str


# Files are not navigable, so only the display name is retained.
FileEntry = str


@dataclass(frozen=True)
class DirectorySnapshot:
    """Point-in-time listing of one directory's direct children.

    ``subdirectories`` and ``files`` keep the order the directory read yielded.
    """

    path: Path
    subdirectories: tuple[DirectoryEntry, ...] = ()
    files: tuple[FileEntry, ...] = ()


__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "DirectorySnapshot",
]
