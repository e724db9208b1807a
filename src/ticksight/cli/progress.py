"""
Rich-based console output utilities for the ticksight CLI.
"""

from typing import Optional

from rich.console import Console
from rich.status import Status
from rich.table import Table

# Global console instances (err_console writes to stderr)
console = Console()
err_console = Console(stderr=True)


class LoadingIndicator:
    """
    Spinner driven by a service's loading callback.

    Services call the indicator with True when work starts and False when it
    ends, whatever the outcome.

    Example:
        >>> indicator = LoadingIndicator("Loading sightings...")
        >>> service.fetch_sightings(on_loading=indicator)
    """

    def __init__(self, message: str = "Loading...", disable: bool = False) -> None:
        self.message = message
        self.disable = disable
        self.active = False
        self._status: Optional[Status] = None

    def __call__(self, loading: bool) -> None:
        self.active = loading
        if self.disable:
            return
        if loading and self._status is None:
            self._status = err_console.status(f"[bold blue]{self.message}")
            self._status.start()
        elif not loading and self._status is not None:
            self._status.stop()
            self._status = None


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message in red."""
    err_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    err_console.print(f"[yellow]![/yellow] {message}")


def print_table(
    title: str,
    columns: list,
    rows: list,
    show_header: bool = True,
) -> None:
    """
    Print a formatted table.

    Args:
        title: Table title
        columns: List of column names
        rows: List of row data (each row is a list of values)
        show_header: Whether to show column headers
    """
    # Wide enough that the title stays on one line
    table = Table(title=title, show_header=show_header, min_width=len(title) + 4)

    for col in columns:
        table.add_column(col, overflow="fold")

    for row in rows:
        table.add_row(*[str(v) for v in row])

    console.print(table)
