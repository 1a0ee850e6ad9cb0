"""Tests for the settings-backed session."""

import json

import pytest

from switcher.core.pairs import FolderPair
from switcher.core.strategies import DEFAULT_MAX_HOPS, UpwardWalkResolver
from switcher.errors import SettingsError
from switcher.session import SwitcherSession


def walk_hops(session: SwitcherSession) -> int:
    walker = next(s for s in session.resolver.strategies if isinstance(s, UpwardWalkResolver))
    return walker.max_hops


@pytest.fixture
def settings_file(workspace_root):
    path = workspace_root / ".switcher.json"
    path.write_text(json.dumps({"folder_pairs": [["src", "include"]]}))
    return path


def test_session_builds_configured_pairs(workspace_root, settings_file):
    """Configured pairs come from the settings file at start."""
    session = SwitcherSession([workspace_root], settings_file=settings_file)

    assert session.pair_store.configured_pairs == [
        FolderPair(workspace_root / "src", workspace_root / "include")
    ]
    assert walk_hops(session) == DEFAULT_MAX_HOPS


@pytest.mark.asyncio
async def test_session_switch(workspace_root, settings_file, create_files):
    """The session resolves through its configured pairs."""
    source, header = create_files(workspace_root, "src/net/socket.cc", "include/net/socket.hh")
    session = SwitcherSession([workspace_root], settings_file=settings_file)

    assert await session.switch(source) == header
    assert await session.switch(header) == source


@pytest.mark.asyncio
async def test_reload_keeps_learned_pairs(workspace_root, settings_file, create_files):
    """Reloading settings rebuilds configured pairs and keeps learned ones."""
    source, header = create_files(workspace_root, "lib/a/foo.c", "lib/b/foo.h")
    session = SwitcherSession([workspace_root], settings_file=settings_file)
    assert await session.switch(source) == header

    settings_file.write_text(json.dumps({"folder_pairs": [["app", "app_inc"]], "max_hops": 2}))
    session.reload_settings()

    assert session.pair_store.configured_pairs == [
        FolderPair(workspace_root / "app", workspace_root / "app_inc")
    ]
    assert session.pair_store.learned_pairs == [FolderPair(source.parent, header.parent)]
    assert walk_hops(session) == 2


def test_max_hops_override_wins(workspace_root, settings_file):
    """An explicit max_hops beats the settings file."""
    settings_file.write_text(json.dumps({"max_hops": 2}))
    session = SwitcherSession([workspace_root], settings_file=settings_file, max_hops=7)
    assert walk_hops(session) == 7


def test_invalid_settings_file(workspace_root):
    """A broken settings file is reported."""
    path = workspace_root / ".switcher.json"
    path.write_text("{")
    with pytest.raises(SettingsError):
        SwitcherSession([workspace_root], settings_file=path)
