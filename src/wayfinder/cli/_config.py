"""Build a RouterConfig from CLI flags."""

import argparse
from dataclasses import replace

from wayfinder.config import RouterConfig


def config_from_args(args: argparse.Namespace) -> RouterConfig:
    """Apply the flags that were given on top of the defaults."""
    overrides: dict[str, object] = {}
    if args.landing_path is not None:
        overrides["landing_path"] = args.landing_path
    if args.client_url is not None:
        overrides["client_url"] = args.client_url
    if args.case_sensitive:
        overrides["case_sensitive"] = True
    if getattr(args, "maintenance", False):
        overrides["maintenance_mode"] = True
    return replace(RouterConfig(), **overrides)
