"""
Core companion resolution: name matching, folder pairs, glob search and
the strategies that combine them.
"""

from switcher.core.glob import FileSystemGlob, GlobSearcher
from switcher.core.matcher import ExtensionClass, CompanionPattern, pattern_for
from switcher.core.pairs import FolderPair, PairStore, Replacement
from switcher.core.resolver import CompanionResolver
from switcher.core.strategies import PairResolver, UpwardWalkResolver, ResolutionRequest

__all__ = [
    "CompanionPattern",
    "CompanionResolver",
    "ExtensionClass",
    "FileSystemGlob",
    "FolderPair",
    "GlobSearcher",
    "PairResolver",
    "PairStore",
    "Replacement",
    "ResolutionRequest",
    "UpwardWalkResolver",
    "pattern_for",
]
