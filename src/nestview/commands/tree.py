"""Tree command - show the composition tree of a layout"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from nestview.exceptions import NestviewError, handle_error
from nestview.layout import LayoutNode, load_layout


def _describe(node: LayoutNode) -> str:
    parts = [f"[bold cyan]{escape(node.label)}[/bold cyan]"]
    if node.selector:
        parts.append(f"{node.method} [yellow]{escape(node.selector)}[/yellow]")
    elif node.method != "append":
        parts.append(node.method)
    if node.template_name:
        parts.append(f"[dim]{escape(node.template_name)}[/dim]")
    elif node.template:
        parts.append("[dim]inline template[/dim]")
    return "  ".join(parts)


def build_rich_tree(node: LayoutNode, tree: Tree | None = None) -> Tree:
    if tree is None:
        tree = Tree(_describe(node))
    else:
        tree = tree.add(_describe(node))
    for child in node.children:
        build_rich_tree(child, tree)
    return tree


def tree_command(layout: Path) -> None:
    """Print the component tree of a layout file."""
    try:
        node = load_layout(layout)
    except NestviewError as e:
        handle_error(e)

    Console().print(build_rich_tree(node))
