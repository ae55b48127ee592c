"""Static alias table.

Legacy and marketing paths that have no view of their own redirect to a
canonical destination. The table is consulted against the actual
navigation path before any view rule is tried.
"""

import logging
from collections.abc import Iterator, Mapping

from wayfinder.errors import ConfigurationError
from wayfinder.routing.matcher import split_path

logger = logging.getLogger("wayfinder.routing")


def _normalize(path: str, case_sensitive: bool) -> str:
    key = "/" + "/".join(split_path(path))
    return key if case_sensitive else key.casefold()


class RedirectTable(Mapping[str, str]):
    """Immutable mapping of exact alias paths to their redirect targets.

    Lookups ignore trailing slashes, and case unless *case_sensitive*::

        table = RedirectTable({"/home": "/explore", "/": "/explore"})
        table.lookup("/home/")   # "/explore"
        table.lookup("/explore") # None
    """

    __slots__ = ("_case_sensitive", "_entries", "_keys")

    def __init__(self, aliases: Mapping[str, str], *, case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive
        self._entries: dict[str, str] = dict(aliases)
        self._keys: dict[str, str] = {}
        for alias, target in self._entries.items():
            key = _normalize(alias, case_sensitive)
            if key in self._keys:
                msg = f"Redirect alias {alias!r} duplicates {self._keys[key]!r}."
                raise ConfigurationError(msg)
            self._keys[key] = alias
        for alias in self._entries:
            self._follow(alias)

    def __getitem__(self, alias: str) -> str:
        return self._entries[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RedirectTable({self._entries!r})"

    def lookup(self, path: str) -> str | None:
        """Return the redirect target for *path*, or ``None``."""
        alias = self._keys.get(_normalize(path, self._case_sensitive))
        if alias is None:
            return None
        return self._entries[alias]

    def canonicalize(self, path: str) -> str:
        """Follow alias chains until *path* is no longer an alias."""
        return self._follow(path)

    def _follow(self, path: str) -> str:
        seen = [path]
        target = self.lookup(path)
        while target is not None:
            if target in seen:
                chain = " -> ".join([*seen, target])
                msg = f"Redirect cycle: {chain}"
                raise ConfigurationError(msg)
            seen.append(target)
            path = target
            target = self.lookup(path)
        if len(seen) > 2:
            logger.debug("redirect chain %s", " -> ".join(seen))
        return path
