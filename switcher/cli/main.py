"""
Main CLI entry point for header-switcher.
"""

# Standard library imports
import asyncio
import importlib.metadata
import os
from pathlib import Path
from typing import Optional

# Third-party imports
import typer

# Local imports
from switcher.environment import DEFAULT_SETTINGS_FILE, get_env_config
from switcher.errors import SwitcherError
from switcher.file_monitor import SettingsFileMonitor
from switcher.session import SwitcherSession
from switcher.utils.rich_console import get_console, print_error, print_table


console = get_console()


app = typer.Typer(
    help="header-switcher - Jump between C/C++ headers and sources\n\nFinds the companion of a header or source file using folder pairs and an upward directory search."
)


WorkspaceOption = typer.Option(
    None, "--workspace", "-w", help="Workspace root (repeatable, the first one is primary)"
)
SettingsOption = typer.Option(None, "--settings", "-s", help="Settings file with folder_pairs")
MaxHopsOption = typer.Option(None, "--max-hops", min=0, help="Maximum directories searched upwards")


def print_main_help_and_exit():
    typer.echo("\n header-switcher: companion file resolution\n")
    command_rows = [
        ["switch", "Print the companion of a header or source file"],
        ["serve", "Resolve files read from stdin, reloading settings on change"],
        ["pairs", "Show configured folder pairs"],
        ["version", "Show header-switcher version"],
    ]
    print_table(["Subcommand", "Description"], command_rows, title="Available Subcommands")
    typer.echo("\nFor more information about a subcommand, run:")
    typer.echo("  header-switcher <subcommand> --help")
    raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    header-switcher - Jump between C/C++ headers and sources
    """
    if ctx.invoked_subcommand is None:
        print_main_help_and_exit()


def build_session(
    workspace: Optional[list[Path]], settings: Optional[Path], max_hops: Optional[int]
) -> SwitcherSession:
    """Create a session; command line options win over environment variables."""
    env_config = get_env_config()
    roots = workspace or env_config.SWITCHER_WORKSPACE
    if settings is None:
        if workspace and env_config.SWITCHER_SETTINGS_FILE is None:
            settings = Path(roots[0]) / DEFAULT_SETTINGS_FILE
        else:
            settings = env_config.settings_file
    if max_hops is None:
        max_hops = env_config.SWITCHER_MAX_HOPS
    try:
        return SwitcherSession(roots, settings_file=settings, max_hops=max_hops)
    except SwitcherError as error:
        print_error(str(error))
        raise typer.Exit(1)


@app.command()
def switch(
    file: Path = typer.Argument(..., help="Header or source file"),
    workspace: Optional[list[Path]] = WorkspaceOption,
    settings: Optional[Path] = SettingsOption,
    max_hops: Optional[int] = MaxHopsOption,
    open_file: bool = typer.Option(False, "--open", help="Open the companion with the system opener"),
):
    """Print the companion file of FILE."""
    session = build_session(workspace, settings, max_hops)
    try:
        companion = asyncio.run(session.switch(os.path.abspath(file)))
    except SwitcherError as error:
        print_error(str(error))
        raise typer.Exit(1)
    typer.echo(str(companion))
    if open_file:
        typer.launch(str(companion))


async def _serve(session: SwitcherSession) -> int:
    """Resolve one file per stdin line until end of input. Returns the failure count."""
    stdin = typer.get_text_stream("stdin")
    failures = 0
    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            return failures
        file = line.strip()
        if not file:
            continue
        try:
            companion = await session.switch(os.path.abspath(file))
        except SwitcherError as error:
            failures += 1
            print_error(str(error))
            continue
        typer.echo(str(companion))


@app.command()
def serve(
    workspace: Optional[list[Path]] = WorkspaceOption,
    settings: Optional[Path] = SettingsOption,
    max_hops: Optional[int] = MaxHopsOption,
    watch: bool = typer.Option(True, "--watch/--no-watch", help="Reload settings when the file changes"),
):
    """Resolve files read from stdin, one path per line.

    Pairs learned along the way are kept for the whole session.
    """
    session = build_session(workspace, settings, max_hops)
    monitor = None
    if watch and session.settings_file and session.settings_file.parent.is_dir():
        monitor = SettingsFileMonitor(session.settings_file, session.reload_settings)
        monitor.start()
    try:
        asyncio.run(_serve(session))
    except KeyboardInterrupt:
        typer.echo("\nStopped.")
    finally:
        if monitor:
            monitor.stop()


@app.command()
def pairs(
    workspace: Optional[list[Path]] = WorkspaceOption,
    settings: Optional[Path] = SettingsOption,
):
    """Show the configured folder pairs, expanded for every workspace root."""
    session = build_session(workspace, settings, None)
    configured = session.pair_store.configured_pairs
    if not configured:
        console.print("No folder pairs configured.")
        return
    print_table(
        ["First", "Second"],
        [[str(pair.first), str(pair.second)] for pair in configured],
        title="Configured Folder Pairs",
    )


@app.command()
def version():
    """Show the header-switcher version."""
    typer.echo(f"header-switcher version: {importlib.metadata.version('header-switcher')}")


if __name__ == "__main__":
    app()
