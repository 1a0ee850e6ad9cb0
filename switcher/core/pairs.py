"""Folder pair rules.

A folder pair ``(A, B)`` states that files under ``A`` correspond structurally
to files under ``B``. The store keeps the pairs declared in settings together
with pairs learned at runtime from successful upward-walk searches.
"""

import os
from pathlib import Path
from typing import Iterable, NamedTuple, Sequence

from loguru import logger

from switcher.workspace import Workspace, resolve_path, substitute_workspace_folder


class FolderPair(NamedTuple):
    """Two absolute directories whose layouts mirror each other."""
    first: Path
    second: Path

    def relates(self, one: Path, other: Path) -> bool:
        """Check whether this pair relates the two folders, in either order."""
        return (self.first, self.second) in ((one, other), (other, one))


class Replacement(NamedTuple):
    """A pair oriented for a query folder: ``source`` is rewritten to ``target``."""
    source: Path
    target: Path

    def rewrite(self, folder: Path) -> Path:
        """Replace the ``source`` prefix of ``folder`` with ``target``."""
        return self.target / folder.relative_to(self.source)


def is_within(folder: Path, root: Path) -> bool:
    """Segment-wise containment check: ``/repo/src2`` is not within ``/repo/src``."""
    return folder.is_relative_to(root)


class PairStore:
    """Configured and learned folder pairs for one resolver."""

    def __init__(self, workspace: Workspace | None = None, learned_pairs: Iterable[FolderPair] | None = None):
        """Initialize the pair store.

        Args:
            workspace: Workspace used to normalize folders
            learned_pairs: Pairs to seed the learned collection with
        """
        self.workspace = workspace or Workspace()
        self.configured_pairs: list[FolderPair] = []
        self.learned_pairs: list[FolderPair] = []
        for pair in learned_pairs or []:
            self.add_learned_pair(pair.first, pair.second)

    @property
    def pairs(self) -> list[FolderPair]:
        """Configured pairs followed by learned pairs."""
        return self.configured_pairs + self.learned_pairs

    def rebuild_configured(self, folder_pairs: Sequence[Sequence[str]], workspace: Workspace | None = None) -> None:
        """
        Recompute the configured pairs from settings entries.

        An entry whose folders are all absolute is kept as-is. Otherwise the
        entry expands into one pair per workspace root, with every relative
        folder joined under that root.

        Args:
            folder_pairs: Two-element folder lists from settings
            workspace: Replaces the store's workspace when given
        """
        if workspace is not None:
            self.workspace = workspace

        configured: list[FolderPair] = []
        for entry in folder_pairs:
            folders = [substitute_workspace_folder(folder, self.workspace) for folder in entry]
            if not self.workspace.folders:
                first, second = (resolve_path(folder, self.workspace) for folder in folders)
                configured.append(FolderPair(first, second))
                continue
            if all(os.path.isabs(folder) for folder in folders):
                configured.append(FolderPair(*(Path(os.path.normpath(folder)) for folder in folders)))
                continue
            for root in self.workspace.folders:
                first, second = (
                    Path(os.path.normpath(os.path.join(root.path, folder))) for folder in folders
                )
                configured.append(FolderPair(first, second))

        self.configured_pairs = configured
        logger.debug(f"Rebuilt {len(configured)} configured pair(s)")

    def add_learned_pair(self, dir_x: str | Path, dir_y: str | Path) -> bool:
        """
        Record a folder relationship discovered at runtime.

        Returns:
            bool: False if a learned pair already relates the two folders
        """
        first = resolve_path(dir_x, self.workspace)
        second = resolve_path(dir_y, self.workspace)
        if any(pair.relates(first, second) for pair in self.learned_pairs):
            return False
        logger.info(f"Adding pair {first} -> {second}")
        self.learned_pairs.append(FolderPair(first, second))
        return True

    def applicable_pairs(self, folder: str | Path) -> list[Replacement]:
        """
        Orient every pair that applies to ``folder``.

        Pairs matching on their first folder come before pairs matching only on
        their second; pair order is preserved otherwise.
        """
        folder = Path(folder)
        forward: list[Replacement] = []
        reverse: list[Replacement] = []
        for pair in self.pairs:
            if is_within(folder, pair.first):
                forward.append(Replacement(pair.first, pair.second))
            elif is_within(folder, pair.second):
                reverse.append(Replacement(pair.second, pair.first))
        return forward + reverse
