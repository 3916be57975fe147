"""Console output helpers for the CLI."""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..version import Version

console = Console(emoji=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_failure(message: str) -> None:
    """Print a negative, non-error result."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗ {escape(message)}[/red]")


def version_table(version: Version) -> Table:
    """Build a table listing the components of a version.

    Args:
        version: Version to describe.

    Returns:
        Rich table with one row per component.
    """
    table = Table(title=f"Version {version}")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    return table


def version_json(version: Version) -> str:
    """Render a version and its components as JSON."""
    return json.dumps(
        {
            "major": version.major,
            "minor": version.minor,
            "patch": version.patch,
            "version": str(version),
        },
        indent=2,
    )
