"""What a path rule points at.

Targets are static data attached to rules. They are turned into concrete
outcomes by the auth gate once the session status is known.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wayfinder.views import View


@dataclass(frozen=True, slots=True)
class Render:
    """Render *view* with the rule's extracted params (plus any fixed ones)."""

    view: View
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class Redirect:
    """Issue an in-process redirect to *to*."""

    to: str


@dataclass(frozen=True, slots=True)
class SignedOutFallback:
    """Render *authed* for signed-in viewers and *anonymous* otherwise.

    When *return_to* is set, the anonymous target receives a
    ``redirect_path`` param so login can send the viewer back.
    """

    authed: Render | Redirect
    anonymous: Render | Redirect
    return_to: str | None = None


@dataclass(frozen=True, slots=True)
class AccountShortcut:
    """Resolve ``/me``-style paths against the signed-in viewer.

    *profile_path* is formatted with ``username``, e.g. ``"/users/{username}"``.
    """

    profile_path: str
    return_to: str


type Target = Render | Redirect | SignedOutFallback | AccountShortcut
