"""``wayfinder resolve``: resolve one path and print the decision."""

import argparse
import sys

from wayfinder.cli._config import config_from_args
from wayfinder.errors import ConfigurationError
from wayfinder.location import Location
from wayfinder.outcomes import Maintenance, NotFound, Outcome, RedirectTo, RenderNothing, RenderView
from wayfinder.overlay import OverlayController, modal_state_policy, never_modal
from wayfinder.resolver import RouteResolver
from wayfinder.session import ANONYMOUS, RESOLVING, SessionStatus, authenticated


def session_from_args(args: argparse.Namespace) -> SessionStatus:
    if args.resolving:
        return RESOLVING
    if args.onboarding:
        return authenticated("cli-user")
    if args.user:
        return authenticated("cli-user", args.user)
    return ANONYMOUS


def format_outcome(outcome: Outcome) -> str:
    match outcome:
        case RenderView():
            line = f"render {outcome.view.value}"
            if outcome.params:
                line += " " + " ".join(f"{k}={v}" for k, v in outcome.params.items())
            if outcome.remainder:
                line += f" (remainder {outcome.remainder})"
            return line
        case RedirectTo():
            return f"redirect {outcome.path}"
        case RenderNothing():
            return "nothing (session resolving)"
        case NotFound():
            return f"not found {outcome.path}"
        case Maintenance():
            return "maintenance"
    return repr(outcome)


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` and print location, outcome and overlay."""
    config = config_from_args(args)
    policy = modal_state_policy(config.modal_state_key) if args.modal else never_modal
    try:
        overlay = OverlayController(policy, modal_state_key=config.modal_state_key)
        resolver = RouteResolver(config, overlay=overlay)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    status = session_from_args(args)
    if args.from_path:
        resolver.resolve(Location.from_url(args.from_path), status)

    state = {config.modal_state_key: True} if args.modal else None
    result = resolver.resolve(Location.from_url(args.path, state=state), status)

    print(f"location  {result.location.url}")
    print(f"outcome   {format_outcome(result.outcome)}")
    print(f"modal     {'yes' if result.is_modal else 'no'}")
    if result.overlay is not None:
        print(f"overlay   {format_outcome(result.overlay)}")
