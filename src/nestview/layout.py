"""Layout files - describe a component tree in YAML.

Example:

    tag: main
    template: "<header></header><section class='body'></section>"
    children:
      - tag: nav
        selector: header
        template: "<a href='/'>{{ title }}</a>"
      - selector: .body
        method: prepend
        template_name: intro.html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from nestview.component import Component
from nestview.config import EngineSettings
from nestview.exceptions import LayoutError


class LayoutNode(BaseModel):
    """One component in a layout file."""

    model_config = {"extra": "forbid"}

    name: str | None = Field(default=None, description="Label shown by 'nestview tree'")
    tag: str = "div"
    id: str | None = None
    class_name: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)

    template: str | None = Field(default=None, description="Inline template source")
    template_name: str | None = Field(default=None, description="Template file name")
    data: dict[str, Any] = Field(default_factory=dict)

    # Placement inside the parent
    selector: str | None = None
    method: Literal["append", "prepend"] = "append"

    children: list[LayoutNode] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_template(self) -> "LayoutNode":
        if self.template is not None and self.template_name is not None:
            raise ValueError("Cannot provide both 'template' and 'template_name'")
        return self

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        label = self.tag
        if self.id:
            label += f"#{self.id}"
        if self.class_name:
            label += "." + ".".join(self.class_name.split())
        return label


class LayoutComponent(Component):
    """A component built from a LayoutNode: renders its template with its data."""

    def initialize(self, data: dict[str, Any] | None = None, name: str | None = None, **options: Any) -> None:
        self.data = data or {}
        self.name = name

    def build(self) -> None:
        if self.template is not None or self.template_name is not None:
            self.render_template(self.data)


def load_layout(path: Path) -> LayoutNode:
    """Load a layout from a yaml file."""
    if not path.exists():
        raise LayoutError(f"Layout file not found: {path}", path=path)

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise LayoutError(f"Invalid YAML in {path}: {e}", path=path) from e

    return parse_layout(data, path=path)


def parse_layout(data: dict[str, Any], path: Path | None = None) -> LayoutNode:
    try:
        return LayoutNode.model_validate(data)
    except ValidationError as e:
        where = f" in {path}" if path else ""
        raise LayoutError(f"Invalid layout{where}:\n{e}", path=path) from e


def build_tree(
    node: LayoutNode,
    settings: EngineSettings | None = None,
    context: dict[str, Any] | None = None,
) -> LayoutComponent:
    """Instantiate a LayoutNode and its children as components.

    context is shared by every node; a node's own data takes precedence.
    """
    context = context or {}
    component = LayoutComponent(
        tag_name=node.tag,
        id=node.id,
        class_name=node.class_name,
        attributes=dict(node.attributes),
        template=node.template,
        template_name=node.template_name,
        settings=settings,
        data={**context, **node.data},
        name=node.label,
    )

    for child in node.children:
        component.add(build_tree(child, settings, context), child.selector, child.method)

    return component
