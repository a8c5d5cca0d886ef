"""Tests for Surface, the element wrapper views render into."""

import pytest

from nestview import Surface


def tags(surface: Surface) -> list[str]:
    return [child.name for child in surface.children()]


def test_create_with_attributes():
    surface = Surface.create("ul", {"id": "list"})
    assert surface.outer_html == '<ul id="list"></ul>'
    assert not surface.is_attached


def test_append_and_prepend():
    root = Surface.create("div")
    root.append(Surface.create("b"))
    root.prepend(Surface.create("i"))
    root.insert(Surface.create("u"), "append")
    root.insert(Surface.create("s"), "prepend")
    assert tags(root) == ["s", "i", "b", "u"]


def test_append_moves_existing_child_to_end():
    root = Surface.parse("<div><b></b><i></i></div>")
    b = root.query("b")
    root.append(b)
    assert tags(root) == ["i", "b"]


def test_append_moves_between_parents():
    first, second = Surface.create("div"), Surface.create("div")
    child = Surface.create("span")
    first.append(child)
    second.append(child)
    assert first.children() == []
    assert second.children() == [child]


def test_detach_keeps_contents():
    root = Surface.parse("<div><p><em>hi</em></p></div>")
    p = root.query("p")
    p.detach()
    assert root.html == ""
    assert p.outer_html == "<p><em>hi</em></p>"
    assert not p.is_attached


def test_detach_unattached_is_noop():
    surface = Surface.create("p")
    assert surface.detach() is surface


def test_query_returns_none_when_missing():
    assert Surface.create("div").query(".missing") is None


def test_query_all():
    root = Surface.parse("<ul><li>a</li><li>b</li></ul>")
    assert [li.text for li in root.query_all("li")] == ["a", "b"]


def test_set_html_replaces_contents():
    root = Surface.parse("<div><p>old</p></div>")
    root.set_html("<h1>new</h1> tail")
    assert root.html == "<h1>new</h1> tail"


def test_set_html_keeps_removed_children_usable():
    root = Surface.create("div")
    child = Surface.parse("<span>kept</span>")
    root.append(child)
    root.set_html("<p></p>")
    assert not child.is_attached
    root.query("p").append(child)
    assert root.html == "<p><span>kept</span></p>"


def test_contains():
    root = Surface.parse("<div><p><em></em></p></div>")
    em = root.query("em")
    assert root.contains(em)
    assert not em.contains(root)


def test_equality_is_identity_of_tag():
    a = Surface.create("p")
    b = Surface.create("p")
    assert a != b
    assert a == Surface(a.tag)
    assert len({a, Surface(a.tag), b}) == 2


def test_parse_without_element_raises():
    with pytest.raises(ValueError, match="No element"):
        Surface.parse("just text")
