"""Render command - build a layout and print its HTML"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from nestview.exceptions import NestviewError, handle_error
from nestview.layout import build_tree, load_layout

from .utils import console, load_data, load_settings

log = logging.getLogger(__name__)


def render_command(
    layout: Path,
    output: Path | None = None,
    data: Path | None = None,
    config: Path | None = None,
    reattach: bool = False,
) -> None:
    """Render a layout file to HTML."""
    try:
        settings = load_settings(config, layout)
        if reattach:
            settings = settings.model_copy(update={"reattach_on_every_render": True})

        node = load_layout(layout)
        root = build_tree(node, settings=settings, context=load_data(data))
        html = root.render().surface.outer_html
    except NestviewError as e:
        handle_error(e)

    log.info("Rendered %s", layout)

    if output is None:
        typer.echo(html)
        return

    output.write_text(html + "\n")
    console.print(f"[green]Wrote[/green] {output}")
