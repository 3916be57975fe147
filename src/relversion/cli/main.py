"""Command-line interface for relversion."""

from pathlib import Path
from typing import Annotated

import typer

from .._version import __version__
from ..compare import sort_versions
from ..exceptions import VersionFormatError
from ..version import Version, current_version
from ._helpers import (
    console,
    print_error,
    print_failure,
    print_success,
    version_json,
    version_table,
)
from .config import ConfigError, load_project_version

app = typer.Typer(help="Parse, compare and sort major.minor.patch versions")

VersionArgument = Annotated[str, typer.Argument(..., help="Version string")]


def _parse_or_exit(version_str: str) -> Version:
    try:
        return Version.parse(version_str)
    except VersionFormatError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the relversion version and exit",
        ),
    ] = False,
) -> None:
    """Parse, compare and sort major.minor.patch versions."""


@app.command()
def parse(
    version: VersionArgument,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the components as JSON")
    ] = False,
) -> None:
    """Parse a version and show its components."""
    parsed = _parse_or_exit(version)
    if as_json:
        typer.echo(version_json(parsed))
    else:
        console.print(version_table(parsed))


@app.command()
def compare(
    first: Annotated[str, typer.Argument(..., help="First version")],
    second: Annotated[str, typer.Argument(..., help="Second version")],
) -> None:
    """Show how two versions are ordered."""
    v1 = _parse_or_exit(first)
    v2 = _parse_or_exit(second)

    symbol = {-1: "<", 0: "==", 1: ">"}[v1.compare(v2)]
    typer.echo(f"{v1} {symbol} {v2}")


@app.command()
def compatible(
    first: Annotated[str, typer.Argument(..., help="First version")],
    second: Annotated[str, typer.Argument(..., help="Second version")],
) -> None:
    """Check whether two versions share major and minor numbers.

    Exits with status 1 when they are not compatible.
    """
    v1 = _parse_or_exit(first)
    v2 = _parse_or_exit(second)

    if v1.is_compatible_with(v2):
        print_success(f"{v1} is compatible with {v2}")
        raise typer.Exit(0)

    print_failure(f"{v1} is not compatible with {v2}")
    raise typer.Exit(1)


@app.command("sort")
def sort_(
    versions: Annotated[list[str], typer.Argument(..., help="Versions to sort")],
    reverse: Annotated[
        bool, typer.Option("--reverse", "-r", help="Newest first")
    ] = False,
) -> None:
    """Sort versions, oldest first."""
    parsed = [_parse_or_exit(v) for v in versions]
    for version in sort_versions(parsed, reverse=reverse):
        typer.echo(str(version))


@app.command()
def current(
    config: Annotated[
        Path | None,
        typer.Option(
            ...,
            "--config",
            "-c",
            help="Path to pyproject.toml (default: ./pyproject.toml)",
        ),
    ] = None,
) -> None:
    """Print the project version from pyproject.toml.

    Falls back to the relversion version when there is no project file.
    """
    try:
        version = load_project_version(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    typer.echo(str(version if version is not None else current_version()))


if __name__ == "__main__":
    app()
