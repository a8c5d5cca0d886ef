"""CLI commands"""

from .render import render_command
from .tree import tree_command

__all__ = ["render_command", "tree_command"]
