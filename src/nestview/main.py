"""nestview CLI Main Entry Point

Compose a component tree from a YAML layout and render it.

Usage:
    nestview render page.yaml                 # Print HTML
    nestview render page.yaml -o page.html    # Write HTML to a file
    nestview render page.yaml --data ctx.yaml # Shared template data
    nestview tree page.yaml                   # Show the composition tree
    nestview --version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import render_command, tree_command
from .commands.utils import setup_logging

app = typer.Typer(help="Compose nested views from a layout file and render them.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nestview {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """nestview - nested view composition."""


@app.command()
def render(
    layout: Path = typer.Argument(..., help="Layout YAML file."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write HTML to file instead of stdout."
    ),
    data: Optional[Path] = typer.Option(
        None, "-d", "--data", help="YAML file with data shared by every template."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Engine settings YAML file."
    ),
    reattach: bool = typer.Option(
        False, "--reattach", help="Detach children before every re-render."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a layout file to HTML."""
    setup_logging(verbose)
    render_command(layout, output=output, data=data, config=config, reattach=reattach)


@app.command()
def tree(
    layout: Path = typer.Argument(..., help="Layout YAML file."),
) -> None:
    """Show the component tree of a layout file."""
    tree_command(layout)


if __name__ == "__main__":
    app()
