"""Template renderers.

A renderer is anything with ``compile(source) -> (data) -> markup``.
Components call compile once and keep the result, so renderers do not need
to cache.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import jinja2
from jinja2 import BaseLoader, Environment, FileSystemLoader

from nestview.exceptions import TemplateError

CompiledTemplate = Callable[[dict[str, Any]], str]


class TemplateRenderer(Protocol):
    def compile(self, source: str) -> CompiledTemplate: ...


class JinjaRenderer:
    """Compiles template strings with Jinja2.

    When template_dir is given, templates can {% include %} or
    {% extends %} files from it.
    """

    def __init__(
        self,
        env: Environment | None = None,
        *,
        template_dir: Path | None = None,
        autoescape: bool = True,
    ):
        if env is None:
            loader = FileSystemLoader(str(template_dir)) if template_dir else BaseLoader()
            env = Environment(loader=loader, autoescape=autoescape)
        self.env = env

    def compile(self, source: str) -> CompiledTemplate:
        try:
            template = self.env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(f"Template syntax error: {e}", source=source) from e

        def render(data: dict[str, Any]) -> str:
            try:
                return template.render(**data)
            except jinja2.TemplateError as e:
                raise TemplateError(f"Template failed to render: {e}", source=source) from e

        return render


class FormatRenderer:
    """Renders str.format templates, e.g. "<h1>{title}</h1>"."""

    def compile(self, source: str) -> CompiledTemplate:
        def render(data: dict[str, Any]) -> str:
            try:
                return source.format(**data)
            except (KeyError, IndexError) as e:
                raise TemplateError(f"Undefined variable in template: {e}", source=source) from e

        return render


@lru_cache(maxsize=None)
def default_renderer(template_dir: Path | None = None, autoescape: bool = True) -> JinjaRenderer:
    """Shared Jinja renderer per (template_dir, autoescape)."""
    return JinjaRenderer(template_dir=template_dir, autoescape=autoescape)


def read_template(name: str, template_dir: Path | None) -> str:
    """Read a template file's source from template_dir."""
    if template_dir is None:
        raise TemplateError(f"Cannot load template '{name}': no template_dir configured")

    path = Path(template_dir) / name
    if not path.is_file():
        raise TemplateError(f"Template '{name}' not found in {template_dir}")
    return path.read_text()
