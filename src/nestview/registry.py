"""Child registry - the ordered list of children a component owns.

Registry order is both the attachment order and the order children() reports.
Links are compared by identity, never by value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, get_args

from nestview.surface import InsertMethod

if TYPE_CHECKING:
    from nestview.view import View

log = logging.getLogger(__name__)

INSERT_METHODS = get_args(InsertMethod)


@dataclass(eq=False)
class ChildLink:
    """Binds a child view to where and how it is attached."""

    view: View
    registry: ChildRegistry = field(repr=False)
    selector: str | None = None
    method: InsertMethod = "append"
    # Set the first time the child is attached; never reset
    rendered: bool = False


class ChildRegistry:
    """Ordered collection of ChildLinks owned by one parent."""

    def __init__(self, owner: Any = None):
        self.owner = owner
        self._links: list[ChildLink] = []

    def add(
        self,
        view: View,
        selector: str | None = None,
        method: InsertMethod = "append",
    ) -> ChildLink:
        """Register view and point its parent_link at the new entry."""
        if method not in INSERT_METHODS:
            raise ValueError(
                f"Invalid insertion method {method!r}, expected one of {INSERT_METHODS}"
            )

        link = ChildLink(view=view, registry=self, selector=selector, method=method)
        view.parent_link = link
        self._links.append(link)
        log.debug("Added %r to %r (%s %s)", view, self.owner, method, selector or "<root>")
        return link

    def discard(self, link: ChildLink) -> None:
        """Remove exactly this link. No-op if it is not here."""
        for i, existing in enumerate(self._links):
            if existing is link:
                del self._links[i]
                break
        else:
            return

        if link.view.parent_link is link:
            link.view.parent_link = None

    def clear(self) -> None:
        """Drop every link without removing the child views."""
        links, self._links = self._links, []
        for link in links:
            if link.view.parent_link is link:
                link.view.parent_link = None

    def links(self) -> list[ChildLink]:
        """Snapshot of the links, safe to iterate while the registry changes."""
        return list(self._links)

    def views(self) -> list[View]:
        return [link.view for link in self._links]

    def find(self, view: View) -> ChildLink | None:
        for link in self._links:
            if link.view is view:
                return link
        return None

    def __iter__(self) -> Iterator[ChildLink]:
        return iter(self.links())

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, item: object) -> bool:
        return any(link is item or link.view is item for link in self._links)

    def __repr__(self) -> str:
        return f"<ChildRegistry owner={self.owner!r} children={len(self._links)}>"
