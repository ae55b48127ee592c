"""Wayfinder exception hierarchy.

Exceptions are raised only while rule lists and redirect tables are being
built. Resolution itself never raises: unmatched paths, redirects and
pending sessions are ordinary outcomes (see ``wayfinder.outcomes``).
"""


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when a path rule or redirect table is invalid.

    Typically surfaces at import time, when the default rule list is built.
    """
