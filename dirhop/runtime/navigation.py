"""Navigation state: current snapshot plus the subdirectory selection cursor.

This module intentionally has no UI concerns.
Every transition either fully replaces the snapshot or leaves state untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..dir_model import DirectoryEntry, DirectorySnapshot, is_filesystem_root, load_snapshot, parent_path

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[Path], DirectorySnapshot]


class NavigationState:
    """Single owned browsing state mutated only by the event loop.

    ``selected_index`` indexes ``snapshot.subdirectories``. It is always valid
    while that tuple is non-empty and is pinned to ``0`` (never dereferenced)
    when it is empty. Loader errors propagate out of transitions unchanged.
    """

    def __init__(
        self,
        snapshot: DirectorySnapshot,
        *,
        loader: SnapshotLoader = load_snapshot,
        selected_index: int = 0,
    ) -> None:
        self._loader = loader
        self.snapshot = snapshot
        self.selected_index = self._clamp(selected_index, snapshot)

    @classmethod
    def open(cls, path: Path, loader: SnapshotLoader = load_snapshot) -> NavigationState:
        """Build the initial state for ``path``; raises if it cannot be listed."""
        return cls(loader(path), loader=loader)

    @staticmethod
    def _clamp(index: int, snapshot: DirectorySnapshot) -> int:
        count = len(snapshot.subdirectories)
        if count == 0:
            return 0
        return max(0, min(index, count - 1))

    @property
    def path(self) -> Path:
        return self.snapshot.path

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        """Return the highlighted subdirectory, or ``None`` for no selection."""
        if not self.snapshot.subdirectories:
            return None
        return self.snapshot.subdirectories[self.selected_index]

    def move_selection_down(self) -> bool:
        if self.selected_index >= len(self.snapshot.subdirectories) - 1:
            return False
        self.selected_index += 1
        return True

    def move_selection_up(self) -> bool:
        if self.selected_index <= 0:
            return False
        self.selected_index -= 1
        return True

    def _replace(self, snapshot: DirectorySnapshot, selected_index: int = 0) -> None:
        # Assigned together after the load succeeded.
        self.snapshot = snapshot
        self.selected_index = self._clamp(selected_index, snapshot)

    def descend(self) -> bool:
        """Enter the selected subdirectory; no-op when there is none."""
        target = self.selected_entry
        if target is None:
            return False
        snapshot = self._loader(target.path)
        logger.debug("Descended into %s", snapshot.path)
        self._replace(snapshot)
        return True

    def ascend(self) -> bool:
        """Move to the parent directory; no-op at a filesystem root."""
        if is_filesystem_root(self.path):
            return False
        snapshot = self._loader(parent_path(self.path))
        logger.debug("Ascended to %s", snapshot.path)
        self._replace(snapshot)
        return True

    def reload(self) -> bool:
        """Re-read the current directory, keeping the cursor where possible."""
        snapshot = self._loader(self.path)
        self._replace(snapshot, self.selected_index)
        return True

    def commit(self) -> Path:
        """Return the path to hand back to the shell integration."""
        return self.snapshot.path


__all__ = [
    "NavigationState",
    "SnapshotLoader",
]
