"""nestview exceptions

Structural misuse of the composition engine never raises. These are reserved
for configuration mistakes: bad templates, bad settings, bad layout files.
"""

from __future__ import annotations

import sys
from typing import Any, NoReturn

import typer


class NestviewError(Exception):
    """Base exception for all nestview errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class TemplateError(NestviewError):
    """Raised when a template is missing or fails to compile or render."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)


class ConfigError(NestviewError):
    """Raised when engine settings fail validation."""

    def __init__(self, message: str, path: Any = None):
        self.path = path
        super().__init__(message)


class AlreadyParentedError(NestviewError):
    """Raised when a view with a parent is added elsewhere in strict mode."""

    def __init__(self, view: Any):
        self.view = view
        super().__init__(f"View already has a parent: {view!r}")


class LayoutError(NestviewError):
    """Raised when a layout file cannot be loaded."""

    def __init__(self, message: str, path: Any = None):
        self.path = path
        super().__init__(message)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Print the message and exit with the given code."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Exit cleanly on nestview errors, flag anything else as unexpected."""
    if isinstance(error, NestviewError):
        exit_with_error(error.message, error.exit_code)
    typer.echo(f"Unexpected error: {error}", err=True)
    sys.exit(1)
