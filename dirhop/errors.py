"""Exception types shared by the loader, navigation state, and shell hand-off."""

from __future__ import annotations

from pathlib import Path


class DirhopError(Exception):
    """Base class for all dirhop errors."""


class UnreadableDirectoryError(DirhopError):
    """A directory could not be listed (missing, not a directory, denied, I/O)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidPathError(DirhopError):
    """A path has no final component to display (e.g. a filesystem root)."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"path has no final component: {path}")
        self.path = path


class CommitError(DirhopError):
    """The committed path could not be handed to the shell integration."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"could not write committed path to {target}: {reason}")
        self.target = target
        self.reason = reason


__all__ = [
    "DirhopError",
    "UnreadableDirectoryError",
    "InvalidPathError",
    "CommitError",
]
