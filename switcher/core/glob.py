"""
Glob Search
===========

The glob collaborator is the only way the resolver queries the filesystem.
Searches are coroutines; the blocking directory scan runs in a worker thread
so the event loop is never blocked.
"""

import asyncio
import fnmatch
import os
import re
from pathlib import Path
from typing import Iterable, Protocol

from loguru import logger

_BRACES = re.compile(r"\{([^{}]*)\}")
_MAGIC = re.compile(r"[*?\[]")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternations: ``foo.{h,hpp}`` -> ``["foo.h", "foo.hpp"]``."""
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end():]
    expanded: list[str] = []
    for alternative in match.group(1).split(","):
        expanded.extend(expand_braces(head + alternative + tail))
    return expanded


def split_static_prefix(pattern: str) -> tuple[Path, str]:
    """Split an absolute pattern into the directory to scan and the glob below it."""
    parts = Path(pattern).parts
    index = next((i for i, part in enumerate(parts) if _MAGIC.search(part)), len(parts) - 1)
    return Path(*parts[:index]), str(Path(*parts[index:]))


class GlobSearcher(Protocol):
    """Interface of the glob collaborator."""

    async def search(
        self, pattern: str, base_directory: str | Path, exclude: Iterable[str] = ()
    ) -> list[str]:
        ...


class FileSystemGlob:
    """
    Glob searcher backed by ``pathlib``.

    Relative patterns are matched below ``base_directory`` and returned
    relative to it. Absolute patterns are matched from their static prefix and
    returned as absolute paths. Results are sorted, which makes the
    enumeration order deterministic.
    """

    async def search(
        self, pattern: str, base_directory: str | Path, exclude: Iterable[str] = ()
    ) -> list[str]:
        return await asyncio.to_thread(self._search, pattern, Path(base_directory), list(exclude))

    def _search(self, pattern: str, base_directory: Path, exclude: list[str]) -> list[str]:
        matches: set[str] = set()
        for alternative in expand_braces(pattern):
            absolute = os.path.isabs(alternative)
            if absolute:
                root, relative = split_static_prefix(alternative)
            else:
                root, relative = base_directory, alternative
            if not root.is_dir():
                continue
            for path in root.glob(relative):
                if not path.is_file():
                    continue
                result = str(path) if absolute else str(path.relative_to(base_directory))
                if self._is_excluded(path, result, exclude):
                    continue
                matches.add(result)
        logger.debug(f"glob {pattern} in {base_directory}: {len(matches)} match(es)")
        return sorted(matches)

    @staticmethod
    def _is_excluded(path: Path, result: str, exclude: list[str]) -> bool:
        return any(
            str(path) == excluded
            or fnmatch.fnmatchcase(str(path), excluded)
            or fnmatch.fnmatchcase(result, excluded)
            for excluded in exclude
        )
