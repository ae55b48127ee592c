"""Auth gate: turns rule targets into outcomes for a session status.

A pending session renders nothing rather than the signed-out fallback, so
a viewer who is in fact signed in never sees a flash of the login page
while their session loads.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

from wayfinder.config import RouterConfig
from wayfinder.events import emit_route_event
from wayfinder.outcomes import Outcome, RedirectTo, RenderNothing, RenderView
from wayfinder.session import Anonymous, Authenticated, Resolving, SessionStatus
from wayfinder.targets import AccountShortcut, Redirect, Render, SignedOutFallback, Target
from wayfinder.views import View

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def gate[T](status: SessionStatus, authed: T, fallback: T) -> T | RenderNothing:
    """Pick *authed*, *fallback* or the neutral placeholder.

    Evaluated in a fixed order: resolving, then anonymous, then
    authenticated.
    """
    match status:
        case Resolving():
            return RenderNothing()
        case Anonymous():
            return fallback
        case Authenticated():
            return authed


def resolve_target(
    target: Target,
    status: SessionStatus,
    config: RouterConfig,
    *,
    params: Mapping[str, str] = _EMPTY,
    remainder: str = "",
    path: str | None = None,
) -> Outcome:
    """Turn a rule target into an outcome.

    Dispatch order:

    1. ``Render``            -> ``RenderView`` with rule params merged in
    2. ``Redirect``          -> ``RedirectTo``
    3. ``SignedOutFallback`` -> gate between its two targets; route params
                                only reach the signed-in target
    4. ``AccountShortcut``   -> profile redirect, onboarding, login or nothing
    """
    match target:
        case Render():
            return RenderView(
                view=target.view,
                params=MappingProxyType({**target.params, **params}),
                remainder=remainder,
            )
        case Redirect():
            return RedirectTo(target.to)
        case SignedOutFallback():
            chosen = gate(status, target.authed, _with_return(target.anonymous, target.return_to, config))
            _note_gate(status, path)
            if isinstance(chosen, RenderNothing):
                return chosen
            if isinstance(status, Anonymous):
                return resolve_target(chosen, status, config, path=path)
            return resolve_target(chosen, status, config, params=params, remainder=remainder, path=path)
        case AccountShortcut():
            _note_gate(status, path)
            return account_shortcut(target, status, config)
    msg = f"Unknown rule target: {target!r}"
    raise TypeError(msg)


def account_shortcut(
    shortcut: AccountShortcut,
    status: SessionStatus,
    config: RouterConfig,
) -> Outcome:
    """Resolve a ``/me``-style path for the current viewer.

    Handle presence is only checked once the viewer is known to be
    signed in. A signed-in viewer without a handle has not finished
    onboarding and gets the onboarding view instead of a redirect.
    """
    match status:
        case Resolving():
            return RenderNothing()
        case Anonymous():
            return RenderView(
                view=View.LOGIN,
                params=MappingProxyType({"redirect_path": config.absolute_url(shortcut.return_to)}),
            )
        case Authenticated(identity=identity) if identity.username:
            return RedirectTo(shortcut.profile_path.format(username=quote(identity.username, safe="")))
        case Authenticated():
            return RenderView(view=View.NEW_USER_ONBOARDING)


def _with_return(target: Render | Redirect, return_to: str | None, config: RouterConfig) -> Render | Redirect:
    if return_to is None or not isinstance(target, Render):
        return target
    params = {**target.params, "redirect_path": config.absolute_url(return_to)}
    return Render(view=target.view, params=MappingProxyType(params))


def _note_gate(status: SessionStatus, path: str | None) -> None:
    match status:
        case Resolving():
            emit_route_event("route.gate.pending", path=path)
        case Anonymous():
            emit_route_event("route.gate.anonymous", path=path)
