"""Surface - the element tree a view renders into.

A Surface wraps a single BeautifulSoup tag. The engine only ever inserts,
detaches and queries through this class, so it never has to know how the
markup is stored.
"""

from __future__ import annotations

from typing import Any, Literal

from bs4 import BeautifulSoup, Tag

PARSER = "html.parser"

InsertMethod = Literal["append", "prepend"]

# Factory document for new_tag; created tags are never inserted into it.
_document = BeautifulSoup("", PARSER)


class Surface:
    """A mutable element that can hold other surfaces."""

    def __init__(self, tag: Tag):
        self.tag = tag

    @classmethod
    def create(cls, tag_name: str = "div", attrs: dict[str, Any] | None = None) -> Surface:
        """Create a detached element."""
        return cls(_document.new_tag(tag_name, attrs=dict(attrs or {})))

    @classmethod
    def parse(cls, markup: str) -> Surface:
        """Parse markup whose first element becomes the surface."""
        fragment = BeautifulSoup(markup, PARSER)
        tag = fragment.find(True)
        if tag is None:
            raise ValueError(f"No element in markup: {markup[:50]!r}")
        return cls(tag.extract())

    @property
    def name(self) -> str:
        return self.tag.name

    @property
    def is_attached(self) -> bool:
        return self.tag.parent is not None

    # --- Structure ---

    def append(self, other: Surface) -> Surface:
        """Move other to the end of this element."""
        self.tag.append(other.tag)
        return self

    def prepend(self, other: Surface) -> Surface:
        """Move other to the start of this element."""
        self.tag.insert(0, other.tag)
        return self

    def insert(self, other: Surface, method: InsertMethod = "append") -> Surface:
        if method == "prepend":
            return self.prepend(other)
        return self.append(other)

    def detach(self) -> Surface:
        """Take this element out of its parent, keeping its contents."""
        if self.tag.parent is not None:
            self.tag.extract()
        return self

    def contains(self, other: Surface) -> bool:
        node = other.tag.parent
        while node is not None:
            if node is self.tag:
                return True
            node = node.parent
        return False

    def children(self) -> list[Surface]:
        """Direct child elements, text nodes skipped."""
        return [Surface(c) for c in self.tag.children if isinstance(c, Tag)]

    # --- Query ---

    def query(self, selector: str) -> Surface | None:
        """First descendant matching a CSS selector, or None."""
        found = self.tag.select_one(selector)
        if found is None:
            return None
        return Surface(found)

    def query_all(self, selector: str) -> list[Surface]:
        return [Surface(t) for t in self.tag.select(selector)]

    # --- Content ---

    def set_html(self, markup: str) -> Surface:
        """Replace the contents with parsed markup.

        Existing children are extracted, not destroyed, so a child view's
        surface stays usable and can be attached again.
        """
        self.tag.clear()
        fragment = BeautifulSoup(markup, PARSER)
        for node in list(fragment.contents):
            self.tag.append(node.extract())
        return self

    @property
    def html(self) -> str:
        """Inner markup."""
        return self.tag.decode_contents()

    @property
    def outer_html(self) -> str:
        return str(self.tag)

    @property
    def text(self) -> str:
        return self.tag.get_text()

    def get(self, attr: str, default: Any = None) -> Any:
        return self.tag.get(attr, default)

    def __eq__(self, other: object) -> bool:
        # bs4 compares tags by markup; surfaces are the same only if the tag is
        if not isinstance(other, Surface):
            return NotImplemented
        return self.tag is other.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"<Surface {self.tag.name}>"
