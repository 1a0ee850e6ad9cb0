from typing import Any

from rich.console import Console
from rich.table import Table


# Singleton Console instance
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console()
    return get_console._console


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
    """
    console = get_console()
    table = Table(title=title)
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    console.print(table)


def get_error_console() -> Console:
    if not hasattr(get_error_console, "_console"):
        get_error_console._console = Console(stderr=True)
    return get_error_console._console


def print_error(message: str):
    """Print a failure reason in red on stderr, keeping stdout for results."""
    get_error_console().print(f"❌ {message}", style="red", highlight=False)
