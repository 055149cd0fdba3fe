"""Domain model for one-level directory listings.

This package contains non-UI listing primitives:
- directory/file entry datatypes and the immutable snapshot
- filesystem scanning that builds a snapshot from one directory read
"""

from __future__ import annotations

from .types import DirectoryEntry, DirectorySnapshot, FileEntry
from .fs import display_name, is_filesystem_root, load_snapshot, parent_path

__all__ = [
    "DirectoryEntry",
    "DirectorySnapshot",
    "FileEntry",
    "display_name",
    "is_filesystem_root",
    "load_snapshot",
    "parent_path",
]
