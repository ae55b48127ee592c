"""Modal overlay controller.

Owns the location retained behind a modal. While a modal is open, the
main view tree keeps rendering the retained location and a secondary
route renders the modal on top, matched against the actual location.

Whether a navigation opens a modal is decided by an injectable policy.
The shipped policy, ``never_modal``, keeps the overlay dormant.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from wayfinder.events import emit_route_event
from wayfinder.location import Location

logger = logging.getLogger("wayfinder.overlay")


class ModalPolicy(Protocol):
    """Decides whether *current* should open as a modal over *previous*."""

    def __call__(self, current: Location, previous: Location) -> bool: ...


def never_modal(current: Location, previous: Location) -> bool:
    """Every navigation replaces the page."""
    return False


def modal_state_policy(key: str = "modal") -> ModalPolicy:
    """Open a modal when the navigation state carries *key*.

    The very first location is never modal, since there is nothing to
    show behind it; neither is re-processing the retained location.
    """

    def policy(current: Location, previous: Location) -> bool:
        return current.intends_modal(key) and current is not previous

    return policy


@dataclass(frozen=True, slots=True)
class OverlayState:
    """Overlay decision for one navigation."""

    is_modal: bool
    previous_location: Location
    current_location: Location

    @property
    def effective_location(self) -> Location:
        """The location the main view tree renders against."""
        return self.previous_location if self.is_modal else self.current_location


type OverlayListener = Callable[[bool], None]


class OverlayController:
    """Tracks the retained previous location across navigations.

    Usage::

        overlay = OverlayController()
        state = overlay.navigate(Location.from_url("/spectrum/general"))
        state.effective_location

    ``previous_location`` is overwritten only by navigations that neither
    carry the modal-intent flag nor are treated as modal by the policy.
    It is never cleared once set.
    """

    __slots__ = ("_current", "_is_modal", "_listeners", "_modal_state_key", "_policy", "_previous")

    def __init__(
        self,
        policy: ModalPolicy = never_modal,
        initial: Location | None = None,
        *,
        modal_state_key: str = "modal",
    ) -> None:
        self._policy = policy
        self._modal_state_key = modal_state_key
        self._previous: Location | None = initial
        self._current: Location | None = initial
        self._is_modal = False
        self._listeners: list[OverlayListener] = []

    @property
    def previous_location(self) -> Location | None:
        return self._previous

    @property
    def current_location(self) -> Location | None:
        return self._current

    @property
    def is_modal(self) -> bool:
        return self._is_modal

    @property
    def state(self) -> OverlayState | None:
        """The decision for the latest navigation, or ``None`` before any."""
        if self._current is None or self._previous is None:
            return None
        return OverlayState(
            is_modal=self._is_modal,
            previous_location=self._previous,
            current_location=self._current,
        )

    def on_change(self, listener: OverlayListener) -> Callable[[], None]:
        """Call *listener* with the new flag whenever ``is_modal`` flips.

        Returns a function that unregisters the listener. Calling it more
        than once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def navigate(self, location: Location) -> OverlayState:
        """Process a navigation and return the overlay decision."""
        if self._previous is None:
            self._previous = location

        is_modal = self._policy(location, self._previous)
        if not is_modal and not location.intends_modal(self._modal_state_key):
            self._previous = location
        self._current = location

        if is_modal != self._is_modal:
            self._is_modal = is_modal
            logger.debug("overlay %s at %s", "opened" if is_modal else "closed", location.path)
            self._notify(is_modal)
            emit_route_event(
                "route.overlay.open" if is_modal else "route.overlay.close",
                path=location.path,
                details={"background": self._previous.path},
            )

        return OverlayState(
            is_modal=is_modal,
            previous_location=self._previous,
            current_location=location,
        )

    def _notify(self, is_modal: bool) -> None:
        for listener in list(self._listeners):
            try:
                listener(is_modal)
            except Exception:
                logger.exception("overlay listener %r failed", listener)
