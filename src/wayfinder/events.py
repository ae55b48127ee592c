"""Route events.

Small opt-in event channel for routing telemetry. Applications can register
a sink to forward redirects, not-found paths, gated fallbacks and overlay
transitions to logs or metrics.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any

logger = logging.getLogger("wayfinder.events")


@dataclass(frozen=True, slots=True)
class RouteEvent:
    """A structured routing event."""

    name: str
    timestamp: float = field(default_factory=time)
    path: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


type RouteEventSink = Callable[[RouteEvent], None]


_sink_lock = threading.Lock()
_sink: RouteEventSink | None = None


def set_route_event_sink(sink: RouteEventSink | None) -> None:
    """Set a process-wide sink for route events.

    Pass ``None`` to disable event delivery.
    """
    global _sink
    with _sink_lock:
        _sink = sink


def emit_route_event(
    name: str,
    *,
    path: str | None = None,
    details: dict[str, Any] | None = None,
) -> None:
    """Emit a best-effort route event to the configured sink.

    A failing sink is logged and never propagates into resolution.
    """
    with _sink_lock:
        sink = _sink
    if sink is None:
        return
    try:
        sink(RouteEvent(name=name, path=path, details=details or {}))
    except Exception:
        logger.exception("route event sink failed for %s", name)
