"""A resolver wired to a workspace and its settings file."""

from pathlib import Path
from typing import Iterable

from loguru import logger

from switcher.core.glob import GlobSearcher
from switcher.core.pairs import PairStore
from switcher.core.resolver import CompanionResolver
from switcher.core.strategies import DEFAULT_MAX_HOPS, UpwardWalkResolver
from switcher.settings import SwitcherSettings, load_settings
from switcher.workspace import Workspace


class SwitcherSession:
    """
    Owns the pair store for as long as the host runs.

    Configured pairs are rebuilt from the settings file at start and on every
    ``reload_settings``; learned pairs accumulate for the session's lifetime.
    """

    def __init__(
        self,
        workspace_roots: Iterable[str | Path],
        settings_file: str | Path | None = None,
        max_hops: int | None = None,
        searcher: GlobSearcher | None = None,
    ):
        self.workspace = Workspace.from_paths(workspace_roots)
        self.settings_file = Path(settings_file) if settings_file else None
        self._max_hops_override = max_hops
        self.pair_store = PairStore(self.workspace)
        self.settings = SwitcherSettings()
        self.resolver = CompanionResolver(self.workspace, pair_store=self.pair_store, searcher=searcher)
        self.reload_settings()

    @property
    def max_hops(self) -> int:
        if self._max_hops_override is not None:
            return self._max_hops_override
        if self.settings.max_hops is not None:
            return self.settings.max_hops
        return DEFAULT_MAX_HOPS

    def reload_settings(self) -> None:
        """Re-read the settings file and rebuild the configured pairs."""
        self.settings = load_settings(self.settings_file)
        self.pair_store.rebuild_configured(self.settings.folder_pairs, self.workspace)
        for strategy in self.resolver.strategies:
            if isinstance(strategy, UpwardWalkResolver):
                strategy.max_hops = self.max_hops
        logger.debug(f"Configured pairs: {self.pair_store.configured_pairs}")

    async def switch(self, file: str | Path) -> Path:
        """Resolve the companion of ``file``."""
        return await self.resolver.resolve(file)
