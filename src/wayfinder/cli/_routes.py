"""``wayfinder routes``: list redirects and rules in priority order."""

import argparse
import sys

from wayfinder.cli._config import config_from_args
from wayfinder.errors import ConfigurationError
from wayfinder.routing.route import PathRule
from wayfinder.table import build_modal_rules, build_redirects, build_rules
from wayfinder.targets import AccountShortcut, Redirect, Render, SignedOutFallback, Target


def describe_target(target: Target) -> str:
    """One-line summary of a rule target."""
    match target:
        case Render():
            return target.view.value
        case Redirect():
            return f"-> {target.to}"
        case SignedOutFallback():
            fallback = describe_target(target.anonymous)
            if target.return_to:
                fallback = f"{fallback} (return {target.return_to})"
            return f"{describe_target(target.authed)} | signed out: {fallback}"
        case AccountShortcut():
            return f"-> {target.profile_path} | signed out: login (return {target.return_to})"
    return repr(target)


def _print_rules(title: str, rules: tuple[PathRule, ...]) -> None:
    rows = [(str(i), "exact" if r.exact else "prefix", r.pattern, describe_target(r.target)) for i, r in enumerate(rules, 1)]
    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    widths[0] = max(widths[0], 1)
    widths[1] = max(widths[1], 5)  # "MATCH" header
    widths[2] = max(widths[2], 7)  # "PATTERN" header

    fmt = f"{{:>{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(title)
    print(fmt.format("#", "MATCH", "PATTERN", "TARGET"))
    sep_len = sum(widths) + 6 + max((len(r[3]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))


def run_routes(args: argparse.Namespace) -> None:
    """Print the redirect table, the main rules, and the modal rules."""
    config = config_from_args(args)
    try:
        redirects = build_redirects(config)
        rules = build_rules(config)
        modal_rules = build_modal_rules(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    width = max(len(alias) for alias in redirects)
    print("Redirects")
    for alias, target in redirects.items():
        print(f"{alias:<{width}}  -> {target}")
    print()
    _print_rules("Rules", rules)
    print()
    _print_rules("Modal rules", modal_rules)
