"""Wayfinder: route resolution and modal overlays for a community app.

Turns a navigation (path, query, modal intent) plus the viewer's session
status into a decision: which view to render, with which params, whether
it sits in a modal over a preserved background page, or whether to
redirect, wait, or show not-found.

Basic usage::

    from wayfinder import ANONYMOUS, Location, RouteResolver

    resolver = RouteResolver()
    result = resolver.resolve(Location.from_url("/spectrum/general"), ANONYMOUS)
    result.view    # View.CHANNEL
    result.params  # {"communitySlug": "spectrum", "channelSlug": "general"}
"""

__version__ = "0.1.0"
__all__ = [
    "ANONYMOUS",
    "RESOLVING",
    "Anonymous",
    "Authenticated",
    "ConfigurationError",
    "Identity",
    "Location",
    "Maintenance",
    "NotFound",
    "OverlayController",
    "RedirectTo",
    "RenderNothing",
    "RenderView",
    "Resolution",
    "Resolving",
    "RouteResolver",
    "RouterConfig",
    "View",
    "WayfinderError",
    "authenticated",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    if name in ("RouteResolver", "Resolution"):
        from wayfinder import resolver as _resolver

        return getattr(_resolver, name)

    if name == "RouterConfig":
        from wayfinder.config import RouterConfig

        return RouterConfig

    if name == "Location":
        from wayfinder.location import Location

        return Location

    if name == "OverlayController":
        from wayfinder.overlay import OverlayController

        return OverlayController

    if name == "View":
        from wayfinder.views import View

        return View

    if name in ("ANONYMOUS", "RESOLVING", "Anonymous", "Authenticated", "Identity", "Resolving", "authenticated"):
        from wayfinder import session as _session

        return getattr(_session, name)

    if name in ("Maintenance", "NotFound", "RedirectTo", "RenderNothing", "RenderView"):
        from wayfinder import outcomes as _outcomes

        return getattr(_outcomes, name)

    if name in ("ConfigurationError", "WayfinderError"):
        from wayfinder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
