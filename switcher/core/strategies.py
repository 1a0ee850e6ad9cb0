"""
Resolution Strategies
=====================

Each strategy looks for a companion file in its own way and returns its path,
or None when it found nothing. The orchestrator tries them in order.

Classes:
    ResolutionStrategy: Base class for strategies
    PairResolver: Rewrites the file's folder through applicable folder pairs
    UpwardWalkResolver: Searches the file's ancestor directories
"""

import os
from pathlib import Path
from typing import NamedTuple

from loguru import logger

from switcher.core.glob import GlobSearcher
from switcher.core.matcher import CompanionPattern, rank_matches
from switcher.core.pairs import PairStore

DEFAULT_MAX_HOPS = 10


class ResolutionRequest(NamedTuple):
    """A single lookup: the file, its companion pattern and the workspace root."""
    file: Path
    companion: CompanionPattern
    workspace_root: Path


class ResolutionStrategy:
    """Base class for resolution strategies."""

    name = "strategy"
    # Whether the orchestrator records a learned pair when this strategy succeeds
    learns_on_success = False

    def __init__(self, searcher: GlobSearcher):
        self.searcher = searcher

    async def find(self, request: ResolutionRequest) -> Path | None:
        raise NotImplementedError


class PairResolver(ResolutionStrategy):
    """Find the companion in folders related to the file's folder by a pair rule."""

    name = "pairs"

    def __init__(self, searcher: GlobSearcher, pair_store: PairStore):
        super().__init__(searcher)
        self.pair_store = pair_store

    async def find(self, request: ResolutionRequest) -> Path | None:
        folder = Path(os.path.normpath(request.file.parent))
        filename = request.file.name
        for replacement in self.pair_store.applicable_pairs(folder):
            target = replacement.rewrite(folder)
            pattern = f"{target}/{request.companion.pattern}"
            matches = await self.searcher.search(pattern, request.workspace_root)
            if not matches:
                continue
            best = rank_matches(matches, filename, key=lambda match: Path(match).name)[0]
            best_path = Path(os.path.normpath(best))
            if not best_path.is_absolute():
                best_path = Path(os.path.normpath(request.workspace_root / best_path))
            logger.info(f"Found using pairs {replacement.source} -> {replacement.target}")
            return best_path
        return None


class UpwardWalkResolver(ResolutionStrategy):
    """
    Search the file's directory and then each ancestor, one parent per hop.

    The walk stops without a result when it reaches ``top_dir``, the
    filesystem root, or runs out of hops. The file's own directory is always
    searched, even when it is ``top_dir``, but the walk never goes above it.
    """

    name = "upward-walk"
    learns_on_success = True

    def __init__(self, searcher: GlobSearcher, max_hops: int = DEFAULT_MAX_HOPS, top_dir: Path | None = None):
        super().__init__(searcher)
        self.max_hops = max_hops
        self.top_dir = top_dir

    async def find(self, request: ResolutionRequest) -> Path | None:
        top_dir = self.top_dir or request.workspace_root
        pattern = f"**/{request.companion.pattern}"
        original = str(request.file)
        start = request.file.parent
        directory = start
        hops_remaining = self.max_hops

        while True:
            if directory == top_dir and directory != start:
                break
            if directory.parent == directory or hops_remaining == 0:
                break
            matches = await self.searcher.search(pattern, directory, exclude=[original])
            if matches:
                resolved = [Path(os.path.normpath(directory / match)) for match in matches]
                logger.info(f"Found using glob {pattern} in {directory}")
                return rank_matches(resolved, original)[0]
            if directory == top_dir:
                break
            hops_remaining -= 1
            directory = directory.parent
        logger.debug(f"Upward walk from {start} found nothing")
        return None
