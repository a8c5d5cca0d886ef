"""Base view.

A View owns one Surface and exposes a fixed lifecycle:

    render():  on_before_render -> build -> on_after_render
    remove():  on_before_remove -> undelegate + detach -> on_after_remove

Subclasses put their render body in build(). The lifecycle hooks are the
extension points the composition engine plugs into; overriding them is fine
as long as super() is called.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bs4 import Tag

from nestview.options import result
from nestview.surface import Surface

if TYPE_CHECKING:
    from nestview.registry import ChildLink

log = logging.getLogger(__name__)

# Options copied onto the view when passed to the constructor
VIEW_OPTIONS = (
    "model",
    "collection",
    "el",
    "id",
    "attributes",
    "class_name",
    "tag_name",
    "events",
)

_cids = itertools.count(1)


@dataclass
class Event:
    """An interaction dispatched to a view's handlers."""

    name: str
    target: Surface | None
    view: View


@dataclass
class Binding:
    """One delegated handler: event name, optional selector, callable."""

    event: str
    selector: str | None
    handler: Callable[[Event], Any]


class View:
    """Base view: element creation, event delegation, render/remove."""

    tag_name: str = "div"
    class_name: str | None = None
    id: str | None = None
    attributes: Any = None
    # {"event selector": handler or method name}, or a method returning one
    events: Any = None

    model: Any = None
    collection: Any = None
    el: Tag | Surface | None = None

    def __init__(self, **options: Any):
        self.cid = f"view{next(_cids)}"
        self.parent_link: ChildLink | None = None
        self.has_rendered = False
        self._bindings: list[Binding] = []

        for key in VIEW_OPTIONS:
            if key in options:
                setattr(self, key, options[key])

        self._ensure_element()
        self.initialize(**options)

    def initialize(self, **options: Any) -> None:
        """Called once at the end of construction. No-op by default."""
        pass

    # --- Element ---

    def _ensure_element(self) -> None:
        if self.el is not None:
            self.set_element(self.el)
            return

        attrs = dict(result(self, "attributes") or {})
        if self.id:
            attrs["id"] = self.id
        if self.class_name:
            attrs["class"] = self.class_name
        self.set_element(Surface.create(self.tag_name, attrs))

    def set_element(self, el: Tag | Surface) -> View:
        """Switch the view's root element and re-delegate events."""
        self.undelegate_events()
        self.surface = el if isinstance(el, Surface) else Surface(el)
        self.el = self.surface.tag
        self.delegate_events()
        return self

    def query(self, selector: str) -> Surface | None:
        """Find a descendant of this view's surface."""
        return self.surface.query(selector)

    # --- Lifecycle ---

    def render(self) -> View:
        self.on_before_render()
        self.build()
        self.has_rendered = True
        self.on_after_render()
        return self

    def build(self) -> None:
        """Populate the surface. Override in subclasses."""
        pass

    def remove(self) -> View:
        self.on_before_remove()
        self.undelegate_events()
        self.surface.detach()
        self.on_after_remove()
        return self

    def on_before_render(self) -> None:
        pass

    def on_after_render(self) -> None:
        pass

    def on_before_remove(self) -> None:
        self._remove_from_parent()

    def on_after_remove(self) -> None:
        pass

    def _remove_from_parent(self) -> None:
        """Drop the registry entry that currently owns this view, if any."""
        link = self.parent_link
        if link is None:
            return
        link.registry.discard(link)

    # --- Events ---

    def delegate_events(self, events: Mapping[str, Any] | None = None) -> View:
        """(Re)bind handlers from the events table. Safe to call repeatedly."""
        if events is None:
            events = result(self, "events") or {}
        self.undelegate_events()

        for key, method in events.items():
            handler = method if callable(method) else getattr(self, method, None)
            if handler is None:
                log.debug("%r has no handler %r for %r", self, method, key)
                continue
            event_name, _, selector = key.strip().partition(" ")
            self._bindings.append(Binding(event_name, selector.strip() or None, handler))

        return self

    def undelegate_events(self) -> View:
        self._bindings = []
        return self

    @property
    def bindings(self) -> list[Binding]:
        return list(self._bindings)

    def dispatch(self, event: str, target: Surface | None = None) -> int:
        """Invoke handlers bound to event whose selector matches target.

        Handlers without a selector fire for any target. Returns the number
        of handlers called.
        """
        called = 0
        for binding in list(self._bindings):
            if binding.event != event:
                continue
            if binding.selector and not self._delegates_to(binding.selector, target):
                continue
            binding.handler(Event(event, target, self))
            called += 1
        return called

    def _delegates_to(self, selector: str, target: Surface | None) -> bool:
        if target is None:
            return False
        matches = self.surface.tag.select(selector)
        node = target.tag
        while node is not None and node is not self.surface.tag:
            if any(node is m for m in matches):
                return True
            node = node.parent
        return False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} cid={self.cid!r}>"
