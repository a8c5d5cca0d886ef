"""Tests for ChildRegistry and ChildLink."""

import pytest

from nestview import ChildRegistry, View


@pytest.fixture
def registry():
    return ChildRegistry(owner="parent")


def test_add_returns_link(registry):
    view = View()
    link = registry.add(view, ".slot", "prepend")
    assert link.view is view
    assert link.registry is registry
    assert (link.selector, link.method, link.rendered) == (".slot", "prepend", False)
    assert view.parent_link is link


def test_views_in_order(registry):
    views = [View() for _ in range(3)]
    for view in views:
        registry.add(view)
    assert registry.views() == views
    assert len(registry) == 3


def test_discard_by_identity(registry):
    """Two links to the same view are still told apart."""
    view = View()
    first = registry.add(view)
    second = registry.add(view)

    registry.discard(first)

    assert registry.links() == [second]
    assert view.parent_link is second


def test_discard_clears_parent_link(registry):
    view = View()
    link = registry.add(view)
    registry.discard(link)
    assert view.parent_link is None
    assert view not in registry


def test_discard_absent_is_noop(registry):
    other = ChildRegistry()
    stray = other.add(View())
    registry.add(View())

    registry.discard(stray)

    assert len(registry) == 1
    assert stray.view.parent_link is stray


def test_clear_keeps_views_alive(registry):
    views = [View(), View()]
    for view in views:
        registry.add(view)
    registry.clear()

    assert len(registry) == 0
    assert all(v.parent_link is None for v in views)
    assert all(v.surface.tag is v.el for v in views)


def test_iteration_is_a_snapshot(registry):
    links = [registry.add(View()) for _ in range(3)]
    seen = []
    for link in registry:
        seen.append(link)
        registry.discard(link)
    assert seen == links
    assert len(registry) == 0


def test_find_and_contains(registry):
    view = View()
    link = registry.add(view)
    assert registry.find(view) is link
    assert registry.find(View()) is None
    assert view in registry
    assert link in registry


def test_invalid_method(registry):
    with pytest.raises(ValueError):
        registry.add(View(), method="replace")
