"""Shared fixtures and helper views for nestview tests."""

from __future__ import annotations

import logging

import pytest

from nestview import Component
from nestview.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_state():
    """Reset process-wide settings and CLI logging between tests."""
    reset_settings()
    yield
    reset_settings()
    logger = logging.getLogger("nestview")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class Probe(Component):
    """Component that records what the engine does to it."""

    tag_name = "section"

    def initialize(self, name: str = "", journal: list | None = None, **options):
        self.name = name
        self.journal = journal if journal is not None else []
        self.el["data-name"] = name
        self.render_calls = 0
        self.delegate_calls = 0

    def build(self):
        self.render_calls += 1

    def delegate_events(self, events=None):
        self.delegate_calls = getattr(self, "delegate_calls", 0) + 1
        return super().delegate_events(events)

    def on_after_remove(self):
        self.journal.append(self.name)
        super().on_after_remove()


def names(surface) -> list[str]:
    """data-name of each direct child element."""
    return [child.get("data-name") for child in surface.children()]
