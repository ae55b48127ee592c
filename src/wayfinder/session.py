"""Session status as seen by the router.

Exactly one of three states holds at a time. The router never infers a
transition; the session source hands it a new value.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Identity:
    """The signed-in viewer.

    ``username`` is ``None`` until onboarding is complete.
    """

    id: str
    username: str | None = None

    @property
    def is_onboarded(self) -> bool:
        return bool(self.username)


@dataclass(frozen=True, slots=True)
class Resolving:
    """The session source has not answered yet."""


@dataclass(frozen=True, slots=True)
class Authenticated:
    identity: Identity


@dataclass(frozen=True, slots=True)
class Anonymous:
    """No viewer is signed in."""


type SessionStatus = Resolving | Authenticated | Anonymous

RESOLVING = Resolving()
ANONYMOUS = Anonymous()


def authenticated(id: str, username: str | None = None) -> Authenticated:
    """Shorthand for ``Authenticated(Identity(id, username))``."""
    return Authenticated(Identity(id=id, username=username))
