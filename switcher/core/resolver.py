"""Companion file resolution."""

from pathlib import Path
from typing import Sequence

from loguru import logger

from switcher.core.glob import FileSystemGlob, GlobSearcher
from switcher.core.matcher import pattern_for
from switcher.core.pairs import PairStore
from switcher.core.strategies import (
    DEFAULT_MAX_HOPS,
    PairResolver,
    ResolutionRequest,
    ResolutionStrategy,
    UpwardWalkResolver,
)
from switcher.errors import NotFoundError
from switcher.utils.logging import timeit
from switcher.workspace import Workspace, resolve_path


class CompanionResolver:
    """Resolve the companion of a C/C++ file by trying each strategy in order."""

    def __init__(
        self,
        workspace: Workspace,
        pair_store: PairStore | None = None,
        searcher: GlobSearcher | None = None,
        max_hops: int = DEFAULT_MAX_HOPS,
        strategies: Sequence[ResolutionStrategy] | None = None,
    ):
        """Initialize the resolver.

        Args:
            workspace: Workspace the files belong to
            pair_store: Store of configured and learned pairs, a fresh empty one by default
            searcher: Glob collaborator, a filesystem glob by default
            max_hops: Maximum number of directories the upward walk searches
            strategies: Overrides the default pair-then-walk strategy list
        """
        self.workspace = workspace
        self.pair_store = pair_store or PairStore(workspace)
        self.searcher = searcher or FileSystemGlob()
        self.strategies = list(strategies) if strategies is not None else [
            PairResolver(self.searcher, self.pair_store),
            UpwardWalkResolver(self.searcher, max_hops=max_hops),
        ]

    @timeit
    async def resolve(self, file: str | Path) -> Path:
        """
        Find the companion file of ``file``.

        Raises:
            NotAProjectFileError: If the file is not a C/C++ header or source
            NoWorkspaceError: If no workspace root is open
            NotFoundError: If no strategy found a companion
        """
        companion = pattern_for(file)
        workspace_root = self.workspace.require_root(str(file))
        request = ResolutionRequest(
            file=resolve_path(file, self.workspace),
            companion=companion,
            workspace_root=workspace_root,
        )

        for strategy in self.strategies:
            result = await strategy.find(request)
            if result is None:
                logger.debug(f"Strategy {strategy.name} found nothing for {request.file}")
                continue
            if strategy.learns_on_success:
                self.pair_store.add_learned_pair(request.file.parent, result.parent)
            return result

        raise NotFoundError(str(file))
