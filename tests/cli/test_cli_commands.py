"""Tests for the Typer-based CLI interface."""

import json

import pytest
from typer.testing import CliRunner

from switcher.cli.main import app
from switcher.environment import EnvironmentConfig

runner = CliRunner()


@pytest.fixture
def project(workspace_root, create_files):
    """A workspace with a src/include layout and a settings file."""
    (workspace_root / ".switcher.json").write_text(json.dumps({"folder_pairs": [["src", "include"]]}))
    source, header = create_files(workspace_root, "src/core/engine.cpp", "include/core/engine.hpp")
    return workspace_root, source, header


def test_switch_prints_companion(project):
    """Test resolving a source file to its header."""
    root, source, header = project

    result = runner.invoke(app, ["switch", str(source), "--workspace", str(root)])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(header)


def test_switch_reports_unknown_extension(project):
    """Non C/C++ files fail with the reason."""
    root, _, _ = project
    notes = root / "notes.txt"
    notes.write_text("todo")

    result = runner.invoke(app, ["switch", str(notes), "-w", str(root)])

    assert result.exit_code == 1
    assert "Not a C/C++ file." in result.stderr
    assert result.stdout == ""


def test_switch_reports_not_found(project, create_files):
    """A file without companion fails with exit code 1."""
    root, _, _ = project
    (orphan,) = create_files(root, "tools/orphan.c")

    result = runner.invoke(app, ["switch", str(orphan), "-w", str(root)])

    assert result.exit_code == 1
    assert "No companion file found" in result.stderr


def test_switch_with_explicit_settings(project, tmp_path):
    """--settings replaces the default settings file."""
    root, source, header = project
    (root / ".switcher.json").write_text(json.dumps({"folder_pairs": []}))
    custom = tmp_path / "custom.json"
    custom.write_text(json.dumps({"folder_pairs": [["src", "include"]]}))

    result = runner.invoke(
        app, ["switch", str(source), "-w", str(root), "--settings", str(custom), "--max-hops", "0"]
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == str(header)


def test_switch_reports_invalid_settings(project):
    """A broken settings file is reported instead of crashing."""
    root, source, _ = project
    (root / ".switcher.json").write_text("{")

    result = runner.invoke(app, ["switch", str(source), "-w", str(root)])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.stderr


def test_serve_resolves_each_line(project, create_files):
    """serve answers one line per input path and keeps going after failures."""
    root, source, header = project
    sibling_header, sibling_source = create_files(root, "lib/util.h", "lib/util.c")
    lines = "\n".join([str(source), "", str(root / "README.md"), str(sibling_header)]) + "\n"

    result = runner.invoke(app, ["serve", "-w", str(root), "--no-watch"], input=lines)

    assert result.exit_code == 0
    # stdout carries only companion paths, failure reasons go to stderr
    assert result.stdout.splitlines() == [str(header), str(sibling_source)]
    assert "Not a C/C++ file." in result.stderr


def test_pairs_lists_configured_pairs(project):
    """Test listing expanded folder pairs."""
    root, _, _ = project

    result = runner.invoke(app, ["pairs", "-w", str(root)])

    assert result.exit_code == 0
    assert "Configured Folder Pairs" in result.stdout


def test_pairs_uses_environment_workspace(project, monkeypatch):
    """Without --workspace the settings file comes from the environment configuration."""
    root, _, _ = project
    monkeypatch.setattr(
        "switcher.cli.main.get_env_config", lambda: EnvironmentConfig(SWITCHER_WORKSPACE=[root])
    )

    result = runner.invoke(app, ["pairs"])

    assert result.exit_code == 0
    assert "Configured Folder Pairs" in result.stdout


def test_pairs_environment_settings_file(project, tmp_path, monkeypatch):
    """SWITCHER_SETTINGS_FILE replaces the settings file of the first root."""
    root, _, _ = project
    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"folder_pairs": []}))
    monkeypatch.setattr(
        "switcher.cli.main.get_env_config",
        lambda: EnvironmentConfig(SWITCHER_WORKSPACE=[root], SWITCHER_SETTINGS_FILE=empty),
    )

    result = runner.invoke(app, ["pairs", "-w", str(root)])

    assert result.exit_code == 0
    assert "No folder pairs configured." in result.stdout


def test_pairs_without_settings(tmp_path):
    """Without settings there is nothing to list."""
    result = runner.invoke(app, ["pairs", "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "No folder pairs configured." in result.stdout


def test_no_command_shows_overview():
    """Running without a subcommand prints the command overview."""
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "switch" in result.stdout
