"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from wayfinder.events import RouteEvent, set_route_event_sink


@pytest.fixture
def route_events() -> Iterator[list[RouteEvent]]:
    """Collect route events emitted during a test."""
    events: list[RouteEvent] = []
    set_route_event_sink(events.append)
    try:
        yield events
    finally:
        set_route_event_sink(None)
