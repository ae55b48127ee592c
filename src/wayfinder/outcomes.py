"""Resolution outcomes.

Every resolution ends in exactly one of these. None of them is an error:
an unmatched path is ``NotFound``, a pending session is ``RenderNothing``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wayfinder.views import View


@dataclass(frozen=True, slots=True)
class RenderView:
    """Render *view* with *params*.

    ``remainder`` is the unmatched path suffix left by a prefix rule; views
    that do their own sub-routing read it.
    """

    view: View
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    remainder: str = ""


@dataclass(frozen=True, slots=True)
class RedirectTo:
    """Client-side redirect to *path*."""

    path: str


@dataclass(frozen=True, slots=True)
class RenderNothing:
    """Neutral placeholder while the session is still resolving."""


@dataclass(frozen=True, slots=True)
class NotFound:
    """No rule matched *path*."""

    path: str


@dataclass(frozen=True, slots=True)
class Maintenance:
    """The application is in maintenance mode."""


type Outcome = RenderView | RedirectTo | RenderNothing | NotFound | Maintenance
