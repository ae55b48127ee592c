"""Route resolver: turns a navigation plus session status into a decision.

Resolution steps, in order:

1. Maintenance mode short-circuits everything.
2. The overlay controller records the navigation and decides whether it
   opens a modal; the main switch matches the *effective* location.
3. The redirect table is checked against the *actual* path.
4. The main rule list is matched against the effective location, with
   gated targets handed to the auth gate.
5. While a modal is open, the modal rules are matched against the actual
   location to select the overlay view.
6. Nothing matched: ``NotFound``.

Resolution never raises. Each outcome is a value the presentation layer
renders.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from wayfinder.config import RouterConfig
from wayfinder.events import emit_route_event
from wayfinder.gate import resolve_target
from wayfinder.location import Location
from wayfinder.outcomes import Maintenance, NotFound, Outcome, RedirectTo, RenderView
from wayfinder.overlay import OverlayController, OverlayState
from wayfinder.routing.matcher import match
from wayfinder.routing.redirects import RedirectTable
from wayfinder.routing.route import PathRule
from wayfinder.session import SessionStatus
from wayfinder.table import build_modal_rules, build_redirects, build_rules
from wayfinder.views import View

logger = logging.getLogger("wayfinder.resolver")


@dataclass(frozen=True, slots=True)
class Resolution:
    """What to render for one navigation.

    ``outcome`` is for the main view tree, ``overlay`` for the secondary
    route drawn over it while ``is_modal`` is set.
    """

    outcome: Outcome
    location: Location
    is_modal: bool = False
    overlay: Outcome | None = None

    @property
    def view(self) -> View | None:
        if isinstance(self.outcome, RenderView):
            return self.outcome.view
        return None

    @property
    def params(self) -> dict[str, Any]:
        if isinstance(self.outcome, RenderView):
            return dict(self.outcome.params)
        return {}

    @property
    def redirect(self) -> str | None:
        if isinstance(self.outcome, RedirectTo):
            return self.outcome.path
        return None


class RouteResolver:
    """Resolves navigations against the routing table.

    Usage::

        resolver = RouteResolver(RouterConfig())
        result = resolver.resolve(Location.from_url("/spectrum/general"), ANONYMOUS)
        result.view  # View.CHANNEL

    The resolver carries session-scoped state through its overlay
    controller: the same location can resolve differently depending on
    which locations preceded it.
    """

    __slots__ = ("_config", "_last", "_modal_rules", "_overlay", "_redirects", "_rules")

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        overlay: OverlayController | None = None,
        rules: Sequence[PathRule] | None = None,
        modal_rules: Sequence[PathRule] | None = None,
        redirects: RedirectTable | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        self._overlay = overlay or OverlayController(modal_state_key=self._config.modal_state_key)
        self._rules = tuple(rules) if rules is not None else build_rules(self._config)
        self._modal_rules = tuple(modal_rules) if modal_rules is not None else build_modal_rules(self._config)
        self._redirects = redirects if redirects is not None else build_redirects(self._config)
        self._last: OverlayState | None = None

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def overlay(self) -> OverlayController:
        return self._overlay

    @property
    def rules(self) -> tuple[PathRule, ...]:
        return self._rules

    @property
    def modal_rules(self) -> tuple[PathRule, ...]:
        return self._modal_rules

    @property
    def redirects(self) -> RedirectTable:
        return self._redirects

    def resolve(self, location: Location, status: SessionStatus) -> Resolution:
        """Process a navigation to *location*."""
        if self._config.maintenance_mode:
            return Resolution(outcome=Maintenance(), location=location)

        state = self._overlay.navigate(location)
        self._last = state
        return self._resolve(state, status)

    def refresh(self, status: SessionStatus) -> Resolution | None:
        """Re-resolve the latest navigation after the session status changed.

        The retained previous location is left untouched. Returns ``None``
        if nothing has been navigated to yet.
        """
        if self._last is None:
            return None
        if self._config.maintenance_mode:
            return Resolution(outcome=Maintenance(), location=self._last.current_location)
        return self._resolve(self._last, status)

    def _resolve(self, state: OverlayState, status: SessionStatus) -> Resolution:
        current = state.current_location
        effective = state.effective_location

        target = self._redirects.lookup(current.path)
        if target is not None:
            logger.debug("redirect %s -> %s", current.path, target)
            emit_route_event("route.redirect", path=current.path, details={"to": target})
            return Resolution(outcome=RedirectTo(target), location=effective, is_modal=state.is_modal)

        outcome = self._match(effective.path, self._rules, status)
        if outcome is None:
            logger.debug("no rule matches %s", effective.path)
            emit_route_event("route.not_found", path=effective.path)
            outcome = NotFound(effective.path)

        overlay = None
        if state.is_modal:
            overlay = self._match(current.path, self._modal_rules, status)

        return Resolution(outcome=outcome, location=effective, is_modal=state.is_modal, overlay=overlay)

    def _match(self, path: str, rules: Sequence[PathRule], status: SessionStatus) -> Outcome | None:
        found = match(path, rules)
        if found is None:
            return None
        logger.debug("%s matched %s %s", path, found.rule.pattern, dict(found.params))
        return resolve_target(
            found.rule.target,
            status,
            self._config,
            params=found.params,
            remainder=found.remainder,
            path=path,
        )
