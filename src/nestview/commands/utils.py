"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.logging import RichHandler

from nestview.config import EngineSettings
from nestview.exceptions import LayoutError

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the nestview CLI.

    Log levels:
    - Normal: Only warnings/errors shown (e.g. a selector matching nothing)
    - Verbose (-v): INFO level
    - Debug (NESTVIEW_DEBUG=1): DEBUG level - every add/render/attach
    """
    debug = bool(os.environ.get("NESTVIEW_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("nestview")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def load_settings(config: Path | None, layout: Path) -> EngineSettings:
    """Settings from --config (or the environment), templates next to the layout"""
    settings = EngineSettings.load(config) if config else EngineSettings()
    settings = EngineSettings.from_env(settings)
    if settings.template_dir is None:
        settings = settings.model_copy(update={"template_dir": layout.parent})
    return settings


def load_data(path: Path | None) -> dict[str, Any]:
    """Load a yaml (or json) data file shared by every template"""
    if path is None:
        return {}
    if not path.exists():
        raise LayoutError(f"Data file not found: {path}", path=path)

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise LayoutError(f"Invalid YAML in data file {path}: {e}", path=path) from e
    if not isinstance(data, dict):
        raise LayoutError(f"Data file must contain a mapping: {path}", path=path)
    return data
