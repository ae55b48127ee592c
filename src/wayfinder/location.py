"""Immutable navigation locations.

A new ``Location`` is created for every navigation event. It carries the
path, the parsed query string, and the caller-supplied navigation state
(the place where a modal-intent flag travels).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import parse_qsl, urlsplit


class QueryParams(Mapping[str, str]):
    """Search params of a location, one value per key.

    A key repeated in the query string keeps its first value, which is
    what views reading ``?tab=`` style params expect.
    """

    __slots__ = ("_params", "_raw")

    def __init__(self, query_string: str = "") -> None:
        self._raw = query_string.lstrip("?")
        params: dict[str, str] = {}
        for key, value in parse_qsl(self._raw, keep_blank_values=True):
            params.setdefault(key, value)
        self._params = params

    def __getitem__(self, key: str) -> str:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._params == other._params
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._params.items()))

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"

    @property
    def raw(self) -> str:
        """The query string without its leading ``?``."""
        return self._raw


@dataclass(frozen=True, slots=True, eq=False)
class Location:
    """Where the viewer is navigating to.

    Identity matters: two navigations to the same URL are distinct
    locations, which is how the overlay controller tells a fresh modal
    navigation apart from the retained background location.
    """

    path: str
    query: QueryParams = field(default_factory=QueryParams)
    state: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_url(cls, url: str, state: Mapping[str, Any] | None = None) -> Location:
        """Build a location from a path-plus-query URL.

        Scheme and host, if present, are discarded::

            Location.from_url("/spectrum/general?tab=top", state={"modal": True})
        """
        parts = urlsplit(url)
        return cls(
            path=parts.path or "/",
            query=QueryParams(parts.query),
            state=MappingProxyType(dict(state or {})),
        )

    def intends_modal(self, key: str = "modal") -> bool:
        """True if the navigation state asks for a modal presentation."""
        return bool(self.state.get(key))

    @property
    def url(self) -> str:
        """Path plus query string."""
        if self.query.raw:
            return f"{self.path}?{self.query.raw}"
        return self.path

    def __repr__(self) -> str:
        return f"Location({self.url!r})"
