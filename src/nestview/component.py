"""Component - a view that owns child views.

Children are registered with a placement (selector + insertion method) and
attached every time the parent renders. A child renders only on its first
attachment. Removing a component removes its children first, then unlinks it
from its own parent.

Usage:
    class Page(Component):
        template = "<header></header><main class='body'></main>"

        def build(self):
            self.render_template()

    page = Page()
    page.append(Sidebar(), ".body").prepend(Banner(), "header")
    page.render()
    ...
    page.remove()   # removes Sidebar and Banner too
"""

from __future__ import annotations

import logging
from typing import Any

from nestview.attach import Attacher
from nestview.config import EngineSettings, get_settings
from nestview.exceptions import AlreadyParentedError, TemplateError
from nestview.options import merge_options, result
from nestview.registry import ChildLink, ChildRegistry
from nestview.surface import InsertMethod
from nestview.template import CompiledTemplate, TemplateRenderer, default_renderer, read_template
from nestview.view import View

log = logging.getLogger(__name__)

# Options copied onto the component on top of the base view options
COMPONENT_OPTIONS = ("template", "template_name", "renderer", "settings")


class Component(View):
    """A view with nested child views."""

    # Mapping, or a method returning one, merged under constructor options
    defaults: Any = None

    template: str | None = None
    template_name: str | None = None
    renderer: TemplateRenderer | None = None
    settings: EngineSettings | None = None

    def __init__(self, **options: Any):
        options = merge_options(result(self, "defaults"), options)
        self.options = options

        for key in COMPONENT_OPTIONS:
            if key in options:
                setattr(self, key, options[key])

        self.settings = self.settings if self.settings is not None else get_settings()
        self.registry = ChildRegistry(self)
        self._attacher = Attacher(self.settings)
        self._compiled_template: CompiledTemplate | None = None

        super().__init__(**options)

    # --- Public API ---

    def append(self, view: View, selector: str | None = None) -> Component:
        """Add a child attached at the end of the element (or selector)."""
        self._add_child(view, selector, "append")
        return self

    def prepend(self, view: View, selector: str | None = None) -> Component:
        """Add a child attached at the start of the element (or selector)."""
        self._add_child(view, selector, "prepend")
        return self

    def add(
        self, view: View, selector: str | None = None, method: InsertMethod = "append"
    ) -> Component:
        self._add_child(view, selector, method)
        return self

    def children(self) -> list[View]:
        return self.registry.views()

    def empty(self) -> Component:
        """Remove every child view."""
        self._remove_children()
        return self

    def render_template(self, data: dict[str, Any] | None = None) -> Component:
        """Render the component's template into its surface.

        The template is compiled on the first call and reused afterwards.
        """
        if self._compiled_template is None:
            self._compiled_template = self._get_renderer().compile(self._template_source())
        self.surface.set_html(self._compiled_template(data or {}))
        return self

    # --- Lifecycle hooks ---

    def on_before_render(self) -> None:
        super().on_before_render()
        if self.settings.reattach_on_every_render:
            self._attacher.detach_all(self)

    def on_after_render(self) -> None:
        self._attacher.attach_all(self)
        super().on_after_render()

    def on_before_remove(self) -> None:
        super().on_before_remove()
        self._remove_children()

    # --- Internals ---

    def _add_child(self, view: View, selector: str | None, method: InsertMethod) -> ChildLink:
        if view.parent_link is not None:
            if self.settings.strict_parenting:
                raise AlreadyParentedError(view)
            # Last parent wins; the previous registry keeps a stale link
            log.warning(
                "%r added to %r while still a child of %r",
                view,
                self,
                view.parent_link.registry.owner,
            )

        link = self.registry.add(view, selector, method)
        if self.settings.attach_on_add and self.has_rendered:
            self._attacher.attach(self, link)
        return link

    def _remove_children(self) -> None:
        views = self.registry.views()
        if views:
            log.debug("Removing %d children of %r", len(views), self)
        for view in views:
            view.remove()
        self.registry.clear()

    def _get_renderer(self) -> TemplateRenderer:
        if self.renderer is not None:
            return self.renderer
        return default_renderer(self.settings.template_dir, self.settings.autoescape)

    def _template_source(self) -> str:
        if self.template is None and self.template_name is None:
            raise TemplateError(f"{self!r} must provide either 'template' or 'template_name'")
        if self.template is not None and self.template_name is not None:
            raise TemplateError(f"{self!r} cannot provide both 'template' and 'template_name'")

        if self.template is not None:
            return self.template
        return read_template(self.template_name, self.settings.template_dir)  # type: ignore[arg-type]
