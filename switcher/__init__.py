"""
header-switcher - Companion file resolution for C/C++ workspaces
"""

from switcher.core import CompanionResolver, FileSystemGlob, PairStore, pattern_for
from switcher.errors import (
    NoWorkspaceError,
    NotAProjectFileError,
    NotFoundError,
    SettingsError,
    SwitcherError,
)
from switcher.session import SwitcherSession
from switcher.workspace import Workspace, WorkspaceFolder, resolve_path

__version__ = "0.1.0"
__all__ = [
    "CompanionResolver",
    "FileSystemGlob",
    "NoWorkspaceError",
    "NotAProjectFileError",
    "NotFoundError",
    "PairStore",
    "SettingsError",
    "SwitcherError",
    "SwitcherSession",
    "Workspace",
    "WorkspaceFolder",
    "pattern_for",
    "resolve_path",
]
