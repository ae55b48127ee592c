"""Tests for wayfinder.routing.redirects: static alias table."""

import pytest

from wayfinder.config import RouterConfig
from wayfinder.errors import ConfigurationError
from wayfinder.routing.redirects import RedirectTable
from wayfinder.table import MARKETING_ALIASES, build_redirects


@pytest.fixture
def table() -> RedirectTable:
    return build_redirects(RouterConfig())


class TestLookup:
    @pytest.mark.parametrize("alias", ["/", *MARKETING_ALIASES, "/users"])
    def test_alias_to_landing(self, table: RedirectTable, alias: str) -> None:
        assert table.lookup(alias) == "/explore"

    def test_old_thread_path_to_root(self, table: RedirectTable) -> None:
        assert table.lookup("/thread") == "/"

    def test_trailing_slash(self, table: RedirectTable) -> None:
        assert table.lookup("/about/") == "/explore"

    def test_case_insensitive(self, table: RedirectTable) -> None:
        assert table.lookup("/FAQ") == "/explore"

    def test_case_sensitive_table(self) -> None:
        table = build_redirects(RouterConfig(case_sensitive=True))
        assert table.lookup("/FAQ") is None
        assert table.lookup("/faq") == "/explore"

    def test_exact_only(self, table: RedirectTable) -> None:
        assert table.lookup("/about/team") is None
        assert table.lookup("/users/alice") is None

    def test_miss(self, table: RedirectTable) -> None:
        assert table.lookup("/explore") is None

    def test_custom_landing_path(self) -> None:
        table = build_redirects(RouterConfig(landing_path="/home-feed"))
        assert table.lookup("/") == "/home-feed"
        assert table.lookup("/home") == "/home-feed"


class TestTotality:
    def test_every_alias_maps_to_its_documented_target(self, table: RedirectTable) -> None:
        documented = {alias: "/explore" for alias in ("/", *MARKETING_ALIASES, "/users")}
        documented["/thread"] = "/"
        assert dict(table) == documented
        for alias, target in documented.items():
            assert table.lookup(alias) == target

    def test_landing_target_is_not_an_alias(self, table: RedirectTable) -> None:
        for alias in table:
            assert table.lookup(table.canonicalize(alias)) is None

    def test_canonicalize_follows_chain(self, table: RedirectTable) -> None:
        assert table.canonicalize("/thread") == "/explore"

    def test_canonicalize_is_idempotent(self, table: RedirectTable) -> None:
        for alias in table:
            once = table.canonicalize(alias)
            assert table.canonicalize(once) == once

    def test_canonicalize_non_alias(self, table: RedirectTable) -> None:
        assert table.canonicalize("/spectrum") == "/spectrum"


class TestConstruction:
    def test_cycle_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="cycle"):
            RedirectTable({"/a": "/b", "/b": "/a"})

    def test_self_cycle_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="cycle"):
            RedirectTable({"/a": "/a/"})

    def test_duplicate_after_normalization_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="duplicates"):
            RedirectTable({"/about": "/explore", "/About/": "/explore"})

    def test_mapping_protocol(self) -> None:
        table = RedirectTable({"/home": "/explore"})
        assert len(table) == 1
        assert table["/home"] == "/explore"
        assert list(table) == ["/home"]
