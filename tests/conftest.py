"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures and utilities for testing header-switcher.
"""

from pathlib import Path
from typing import Iterable

import pytest

from switcher.core.glob import FileSystemGlob
from switcher.workspace import Workspace


class CountingGlob(FileSystemGlob):
    """Filesystem glob that records every search it performs."""

    def __init__(self):
        self.calls: list[tuple[str, Path]] = []

    async def search(self, pattern: str, base_directory, exclude: Iterable[str] = ()) -> list[str]:
        self.calls.append((pattern, Path(base_directory)))
        return await super().search(pattern, base_directory, exclude)


def make_files(root: Path, *relative_paths: str) -> list[Path]:
    """Create empty files (and their parent directories) below ``root``."""
    created = []
    for relative in relative_paths:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        created.append(path)
    return created


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """
    Create an empty workspace directory.

    The workspace lives one level below ``tmp_path`` so tests can place a
    walk boundary above it.
    """
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def workspace(workspace_root: Path) -> Workspace:
    """Workspace with a single root."""
    return Workspace.from_paths([workspace_root])


@pytest.fixture
def counting_glob() -> CountingGlob:
    """Glob searcher that counts its calls."""
    return CountingGlob()


@pytest.fixture
def create_files():
    """Expose ``make_files`` to tests."""
    return make_files


@pytest.fixture
def counting_glob_factory():
    """Create independent counting searchers within one test."""
    return CountingGlob
