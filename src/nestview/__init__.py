"""nestview - nested view composition

Views own child views attached at selectors inside their rendered surface.
Children re-attach on every parent render, render only once, and are removed
in a cascade when their parent is removed.
"""

from nestview._version import __version__
from nestview.attach import Attacher
from nestview.component import Component
from nestview.config import EngineSettings, configure, get_settings
from nestview.exceptions import (
    AlreadyParentedError,
    ConfigError,
    LayoutError,
    NestviewError,
    TemplateError,
)
from nestview.options import UNSET
from nestview.registry import ChildLink, ChildRegistry
from nestview.surface import Surface
from nestview.template import FormatRenderer, JinjaRenderer, TemplateRenderer
from nestview.view import Event, View

__all__ = [
    "__version__",
    # Core classes
    "View",
    "Component",
    "Surface",
    "Event",
    # Composition engine
    "ChildLink",
    "ChildRegistry",
    "Attacher",
    # Templates
    "TemplateRenderer",
    "JinjaRenderer",
    "FormatRenderer",
    # Configuration
    "EngineSettings",
    "configure",
    "get_settings",
    "UNSET",
    # Errors
    "NestviewError",
    "TemplateError",
    "ConfigError",
    "AlreadyParentedError",
    "LayoutError",
]
