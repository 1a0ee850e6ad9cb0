"""Workspace folders and workspace-relative path resolution."""

import os
import re
from pathlib import Path
from typing import NamedTuple, Iterable

from pydantic import BaseModel, Field

from switcher.errors import NoWorkspaceError

WORKSPACE_FOLDER_TOKEN = re.compile(r"\$\{workspaceFolder(?::([^}]+))?\}")


class WorkspaceFolder(NamedTuple):
    """A named workspace root."""
    name: str
    path: Path


class Workspace(BaseModel):
    """The ordered set of workspace roots a resolver works in."""

    folders: list[WorkspaceFolder] = Field(default_factory=list)

    @classmethod
    def from_paths(cls, paths: Iterable[str | Path]) -> "Workspace":
        """Build a workspace from root directories, naming each after its directory."""
        folders = []
        for path in paths:
            absolute = Path(os.path.abspath(os.path.expanduser(str(path))))
            folders.append(WorkspaceFolder(name=absolute.name, path=absolute))
        return cls(folders=folders)

    @property
    def root(self) -> Path | None:
        """Get the first workspace root, or None when no workspace is open."""
        return self.folders[0].path if self.folders else None

    def require_root(self, path: str | None = None) -> Path:
        """Get the first workspace root or raise NoWorkspaceError."""
        if not self.folders:
            raise NoWorkspaceError(path)
        return self.folders[0].path

    def find(self, name: str) -> WorkspaceFolder | None:
        """Find a workspace folder by name."""
        return next((folder for folder in self.folders if folder.name == name), None)


def substitute_workspace_folder(path_like: str, workspace: Workspace) -> str:
    """
    Expand ${workspaceFolder} and ${workspaceFolder:NAME} tokens.

    Unknown folder names, and any token when no workspace is open, are left as-is.
    """

    def _replace(match: re.Match) -> str:
        if not workspace.folders:
            return match.group(0)
        name = match.group(1)
        if not name:
            return str(workspace.folders[0].path)
        folder = workspace.find(name)
        if folder is None:
            return match.group(0)
        return str(folder.path)

    return WORKSPACE_FOLDER_TOKEN.sub(_replace, path_like)


def resolve_path(path_like: str | Path, workspace: Workspace) -> Path:
    """
    Resolve a path string to an absolute path anchored to the workspace.

    Args:
        path_like: Absolute or workspace-relative path, optionally templated
        workspace: Workspace providing the roots

    Returns:
        Path: Lexically normalized absolute path

    Raises:
        NoWorkspaceError: If the path is relative and no workspace root is open
    """
    path = substitute_workspace_folder(str(path_like), workspace)
    if os.path.isabs(path):
        return Path(os.path.normpath(path))
    root = workspace.require_root(path)
    return Path(os.path.normpath(os.path.join(root, path)))
