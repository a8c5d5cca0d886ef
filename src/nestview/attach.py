"""Attacher - puts registered children into their parent's surface.

Children attach in registry order. Each child renders the first time it is
attached and never again for the life of its link; its handlers are re-bound
on every attachment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nestview.config import EngineSettings
from nestview.registry import ChildLink

if TYPE_CHECKING:
    from nestview.component import Component

log = logging.getLogger(__name__)


class Attacher:
    """Drives attachment of a component's children."""

    def __init__(self, settings: EngineSettings | None = None):
        self.settings = settings or EngineSettings()

    def attach_all(self, parent: Component) -> int:
        """Attach every child of parent. Returns how many were attached."""
        attached = 0
        for link in parent.registry.links():
            if self.attach(parent, link):
                attached += 1
        return attached

    def attach(self, parent: Component, link: ChildLink) -> bool:
        """Attach one child.

        A selector that matches nothing skips the child (it is not rendered
        either) without touching its siblings.
        """
        if link.selector:
            target = parent.query(link.selector)
        else:
            target = parent.surface

        if target is None:
            level = logging.WARNING if self.settings.warn_on_missing_target else logging.DEBUG
            log.log(
                level,
                "No element matches %r in %r, skipping %r",
                link.selector,
                parent,
                link.view,
            )
            return False

        if not link.rendered:
            link.view.render()
            link.rendered = True
            log.debug("Rendered %r", link.view)

        target.insert(link.view.surface, link.method)
        link.view.delegate_events()
        log.debug("Attached %r to %r (%s)", link.view, parent, link.method)
        return True

    def detach_all(self, parent: Component) -> None:
        """Detach every child's surface, leaving the registry as is."""
        for view in parent.registry.views():
            view.surface.detach()
