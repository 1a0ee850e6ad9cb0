"""Tests for the filesystem glob searcher."""

from pathlib import Path

import pytest

from switcher.core.glob import FileSystemGlob, expand_braces, split_static_prefix


def test_expand_braces():
    """Test alternation expansion."""
    assert expand_braces("foo.{h,hpp}") == ["foo.h", "foo.hpp"]
    assert expand_braces("{a,b}/foo.{c,cc}") == ["a/foo.c", "a/foo.cc", "b/foo.c", "b/foo.cc"]
    assert expand_braces("foo.h") == ["foo.h"]


def test_split_static_prefix():
    """The static directories of an absolute pattern are split off."""
    assert split_static_prefix("/repo/include/**/foo.h") == (Path("/repo/include"), "**/foo.h")
    assert split_static_prefix("/repo/include/foo.h") == (Path("/repo/include"), "foo.h")


@pytest.mark.asyncio
async def test_relative_pattern_returns_relative_paths(tmp_path, create_files):
    """Relative patterns are matched below the base directory."""
    create_files(tmp_path, "foo.h", "inc/foo.hpp", "inc/bar.h", "foo.cpp")

    matches = await FileSystemGlob().search("**/foo.{h,hpp}", tmp_path)

    assert matches == ["foo.h", str(Path("inc/foo.hpp"))]


@pytest.mark.asyncio
async def test_absolute_pattern_returns_absolute_paths(tmp_path, create_files):
    """Absolute patterns ignore the base directory and return absolute paths."""
    create_files(tmp_path, "include/a/foo.h", "include/a/foo.hh")

    matches = await FileSystemGlob().search(f"{tmp_path}/include/a/foo.{{h,hh}}", "/nonexistent")

    assert matches == [str(tmp_path / "include/a/foo.h"), str(tmp_path / "include/a/foo.hh")]


@pytest.mark.asyncio
async def test_exclude(tmp_path, create_files):
    """Excluded files are dropped from the results."""
    original, _ = create_files(tmp_path, "foo.h", "sub/foo.h")

    matches = await FileSystemGlob().search("**/foo.h", tmp_path, exclude=[str(original)])

    assert matches == [str(Path("sub/foo.h"))]


@pytest.mark.asyncio
async def test_directories_and_missing_roots_are_ignored(tmp_path, create_files):
    """Only files match, and a missing search root yields nothing."""
    (tmp_path / "foo.h").mkdir()

    assert await FileSystemGlob().search("foo.h", tmp_path) == []
    assert await FileSystemGlob().search(f"{tmp_path}/missing/foo.h", tmp_path) == []
