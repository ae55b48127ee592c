"""Tests for wayfinder.resolver: end-to-end resolution."""

import pytest

from wayfinder.config import RouterConfig
from wayfinder.events import RouteEvent
from wayfinder.location import Location
from wayfinder.outcomes import Maintenance, NotFound, RedirectTo, RenderNothing, RenderView
from wayfinder.overlay import OverlayController, modal_state_policy
from wayfinder.resolver import RouteResolver
from wayfinder.routing.matcher import rule
from wayfinder.session import ANONYMOUS, RESOLVING, authenticated
from wayfinder.table import STATIC_PAGES
from wayfinder.targets import Render
from wayfinder.views import View

ALICE = authenticated("u1", "alice")

LITERAL_PATHS = ["/login", "/explore", "/messages", "/thread", "/users", "/me", *STATIC_PAGES]


def _loc(url: str, *, modal: bool = False) -> Location:
    return Location.from_url(url, state={"modal": True} if modal else None)


@pytest.fixture
def resolver() -> RouteResolver:
    return RouteResolver()


@pytest.fixture
def modal_resolver() -> RouteResolver:
    return RouteResolver(overlay=OverlayController(modal_state_policy()))


class TestRedirects:
    @pytest.mark.parametrize("path", ["/", "/home", "/about", "/contact", "/support", "/faq", "/features", "/new", "/users"])
    def test_aliases(self, resolver: RouteResolver, path: str) -> None:
        result = resolver.resolve(_loc(path), ANONYMOUS)
        assert result.outcome == RedirectTo("/explore")
        assert result.redirect == "/explore"
        assert result.view is None

    def test_old_thread_root(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/thread"), ANONYMOUS).redirect == "/"

    def test_community_login(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/spectrum/login"), ANONYMOUS).redirect == "/explore"

    def test_redirect_target_resubmitted(self, resolver: RouteResolver) -> None:
        target = resolver.resolve(_loc("/about"), ANONYMOUS).redirect
        assert target is not None
        result = resolver.resolve(_loc(target), ANONYMOUS)
        assert result.redirect is None
        assert result.view == View.EXPLORE

    def test_redirect_independent_of_session(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/"), RESOLVING).redirect == "/explore"

    def test_redirect_event(self, resolver: RouteResolver, route_events: list[RouteEvent]) -> None:
        resolver.resolve(_loc("/faq"), ANONYMOUS)
        assert [e.name for e in route_events] == ["route.redirect"]
        assert route_events[0].path == "/faq"
        assert route_events[0].details == {"to": "/explore"}


class TestLiteralPrecedence:
    @pytest.mark.parametrize("path", LITERAL_PATHS)
    def test_community_named_like_keyword(self, resolver: RouteResolver, path: str) -> None:
        result = resolver.resolve(_loc(path), ALICE)
        assert result.view not in (View.COMMUNITY, View.CHANNEL, View.THREAD)

    def test_explore(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/explore"), ANONYMOUS).view == View.EXPLORE


class TestViews:
    def test_community(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/spectrum"), ANONYMOUS)
        assert result.view == View.COMMUNITY
        assert result.params == {"communitySlug": "spectrum"}

    def test_channel(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        assert result.view == View.CHANNEL
        assert result.params == {"communitySlug": "spectrum", "channelSlug": "general"}

    @pytest.mark.parametrize(
        "path",
        [
            "/c/ch/id-123-id",
            "/c/ch/custom-slug~id-123-id",
            "/c/ch/~id-123-id",
            "/c/ch/some~custom~slug~id-123-id",
        ],
    )
    def test_thread_identifier(self, resolver: RouteResolver, path: str) -> None:
        result = resolver.resolve(_loc(path), ANONYMOUS)
        assert result.view == View.THREAD
        assert result.params["threadId"] == "id-123-id"

    def test_thread_slug_with_slash(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/c/ch/a/slug~id-123-id"), ANONYMOUS)
        assert result.view == View.THREAD
        assert result.params == {"communitySlug": "c", "channelSlug": "ch", "threadId": "id-123-id"}

    def test_user_profile(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/users/alice"), ANONYMOUS)
        assert result.view == View.USER
        assert result.params == {"username": "alice"}

    def test_static_page(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/terms.html"), ANONYMOUS).view == View.PAGES

    def test_old_thread_route(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/thread/t1"), ANONYMOUS)
        assert result.view == View.OLD_THREAD_REDIRECT
        assert result.params == {"threadId": "t1"}

    def test_query_string_does_not_affect_matching(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/spectrum?tab=members"), ANONYMOUS)
        assert result.view == View.COMMUNITY
        assert result.location.query["tab"] == "members"


class TestGatedViews:
    def test_messages_signed_in(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/messages/t1"), ALICE)
        assert result.view == View.DIRECT_MESSAGES
        assert result.params == {"threadId": "t1"}

    def test_messages_signed_out(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/messages"), ANONYMOUS)
        assert result.view == View.LOGIN
        assert result.params == {"redirect_path": "/messages"}

    def test_messages_resolving(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/messages"), RESOLVING).outcome == RenderNothing()

    def test_login_signed_in_redirects_home(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/login"), ALICE).redirect == "/"

    def test_login_signed_out(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/login"), ANONYMOUS).view == View.LOGIN

    def test_user_settings_signed_out(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/users/alice/settings"), ANONYMOUS)
        assert result.view == View.LOGIN
        assert result.params["redirect_path"] == "/me/settings"

    def test_community_settings_signed_out(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/spectrum/settings"), ANONYMOUS)
        assert result.view == View.LOGIN
        assert result.params == {}

    def test_messages_thread_signed_out_has_only_return_target(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/messages/t1"), ANONYMOUS)
        assert result.params == {"redirect_path": "/messages"}

    def test_channel_settings_signed_in(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/spectrum/general/settings"), ALICE)
        assert result.view == View.CHANNEL_SETTINGS
        assert result.params == {"communitySlug": "spectrum", "channelSlug": "general"}

    def test_client_url_prefix(self) -> None:
        resolver = RouteResolver(RouterConfig(client_url="https://spectrum.chat"))
        result = resolver.resolve(_loc("/messages"), ANONYMOUS)
        assert result.params["redirect_path"] == "https://spectrum.chat/messages"


class TestAccountShortcuts:
    def test_me_with_handle(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/me"), ALICE).redirect == "/users/alice"

    def test_me_settings_with_handle(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/me/settings"), ALICE).redirect == "/users/alice/settings"

    def test_me_without_handle(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/me"), authenticated("u2"))
        assert result.view == View.NEW_USER_ONBOARDING
        assert result.redirect is None

    def test_me_settings_anonymous(self, resolver: RouteResolver) -> None:
        result = resolver.resolve(_loc("/me/settings"), ANONYMOUS)
        assert result.view == View.LOGIN
        assert result.params == {"redirect_path": "/me/settings"}

    def test_me_resolving(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/me"), RESOLVING).outcome == RenderNothing()


class TestSessionRefresh:
    def test_refresh_before_navigation(self, resolver: RouteResolver) -> None:
        assert resolver.refresh(ANONYMOUS) is None

    def test_pending_then_signed_in(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/me"), RESOLVING).outcome == RenderNothing()
        refreshed = resolver.refresh(ALICE)
        assert refreshed is not None
        assert refreshed.redirect == "/users/alice"

    def test_pending_then_anonymous(self, resolver: RouteResolver) -> None:
        assert resolver.resolve(_loc("/messages"), RESOLVING).outcome == RenderNothing()
        refreshed = resolver.refresh(ANONYMOUS)
        assert refreshed is not None
        assert refreshed.view == View.LOGIN

    def test_refresh_keeps_previous_location(self, resolver: RouteResolver) -> None:
        first = _loc("/spectrum")
        resolver.resolve(first, RESOLVING)
        resolver.refresh(ALICE)
        assert resolver.overlay.previous_location is first


class TestNotFound:
    def test_unmatched_path(self) -> None:
        resolver = RouteResolver(rules=[rule("/explore", Render(View.EXPLORE))])
        result = resolver.resolve(_loc("/nowhere"), ANONYMOUS)
        assert result.outcome == NotFound("/nowhere")

    def test_not_found_event(self, route_events: list[RouteEvent]) -> None:
        resolver = RouteResolver(rules=[])
        resolver.resolve(_loc("/nowhere"), ANONYMOUS)
        assert [e.name for e in route_events] == ["route.not_found"]

    def test_default_table_catches_everything_else(self, resolver: RouteResolver) -> None:
        assert isinstance(resolver.resolve(_loc("/a/b/c/d"), ANONYMOUS).outcome, RenderView)


class TestMaintenance:
    def test_short_circuits(self) -> None:
        resolver = RouteResolver(RouterConfig(maintenance_mode=True))
        for path in ("/", "/explore", "/me"):
            assert resolver.resolve(_loc(path), ALICE).outcome == Maintenance()

    def test_refresh_in_maintenance(self) -> None:
        resolver = RouteResolver(RouterConfig(maintenance_mode=True))
        assert resolver.refresh(ALICE) is None


class TestPreviousLocation:
    def test_three_navigations(self, resolver: RouteResolver) -> None:
        a, b, c = _loc("/a"), _loc("/b"), _loc("/c")
        resolver.resolve(a, ANONYMOUS)
        resolver.resolve(b, ANONYMOUS)
        assert resolver.overlay.previous_location is b
        resolver.resolve(c, ANONYMOUS)
        assert resolver.overlay.previous_location is c

    def test_redirected_navigation_is_recorded(self, resolver: RouteResolver) -> None:
        home = _loc("/")
        resolver.resolve(home, ANONYMOUS)
        assert resolver.overlay.previous_location is home

    def test_overlay_dormant_by_default(self, resolver: RouteResolver) -> None:
        background = _loc("/spectrum/general")
        resolver.resolve(background, ANONYMOUS)
        result = resolver.resolve(_loc("/spectrum/general/~t1", modal=True), ANONYMOUS)
        assert result.is_modal is False
        assert result.overlay is None
        assert result.view == View.THREAD
        assert resolver.overlay.previous_location is background

    def test_configured_intent_key(self) -> None:
        resolver = RouteResolver(RouterConfig(modal_state_key="overlay"))
        background = _loc("/spectrum")
        resolver.resolve(background, ANONYMOUS)
        resolver.resolve(Location.from_url("/spectrum/general/~t1", state={"overlay": True}), ANONYMOUS)
        assert resolver.overlay.previous_location is background


class TestModalOverlay:
    def test_background_keeps_rendering(self, modal_resolver: RouteResolver) -> None:
        modal_resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        result = modal_resolver.resolve(_loc("/spectrum/general/hello~t1", modal=True), ANONYMOUS)
        assert result.is_modal is True
        assert result.view == View.CHANNEL
        assert result.location.path == "/spectrum/general"
        assert result.overlay == RenderView(
            View.THREAD_SLIDER,
            {"communitySlug": "spectrum", "channelSlug": "general", "threadId": "t1"},
        )

    def test_old_thread_overlay(self, modal_resolver: RouteResolver) -> None:
        modal_resolver.resolve(_loc("/explore"), ANONYMOUS)
        result = modal_resolver.resolve(_loc("/thread/t1", modal=True), ANONYMOUS)
        assert result.view == View.EXPLORE
        assert result.overlay == RenderView(View.OLD_THREAD_REDIRECT, {"threadId": "t1"})

    def test_overlay_without_matching_modal_rule(self, modal_resolver: RouteResolver) -> None:
        modal_resolver.resolve(_loc("/explore"), ANONYMOUS)
        result = modal_resolver.resolve(_loc("/spectrum", modal=True), ANONYMOUS)
        assert result.is_modal is True
        assert result.view == View.EXPLORE
        assert result.overlay is None

    def test_redirect_checked_against_actual_path(self, modal_resolver: RouteResolver) -> None:
        modal_resolver.resolve(_loc("/spectrum"), ANONYMOUS)
        result = modal_resolver.resolve(_loc("/about", modal=True), ANONYMOUS)
        assert result.redirect == "/explore"

    def test_closing_returns_to_page(self, modal_resolver: RouteResolver) -> None:
        modal_resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        modal_resolver.resolve(_loc("/spectrum/general/~t1", modal=True), ANONYMOUS)
        result = modal_resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        assert result.is_modal is False
        assert result.overlay is None
        assert result.view == View.CHANNEL

    def test_scroll_listener(self, modal_resolver: RouteResolver) -> None:
        frozen: list[bool] = []
        modal_resolver.overlay.on_change(frozen.append)
        modal_resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        modal_resolver.resolve(_loc("/spectrum/general/~t1", modal=True), ANONYMOUS)
        modal_resolver.resolve(_loc("/spectrum/general"), ANONYMOUS)
        assert frozen == [True, False]

    def test_same_location_differs_by_history(self) -> None:
        thread = "/spectrum/general/~t1"
        fresh = RouteResolver(overlay=OverlayController(modal_state_policy()))
        first = fresh.resolve(_loc(thread, modal=True), ANONYMOUS)
        assert first.view == View.THREAD

        seasoned = RouteResolver(overlay=OverlayController(modal_state_policy()))
        seasoned.resolve(_loc("/explore"), ANONYMOUS)
        second = seasoned.resolve(_loc(thread, modal=True), ANONYMOUS)
        assert second.view == View.EXPLORE

    def test_gated_overlay_uses_session(self) -> None:
        resolver = RouteResolver(
            overlay=OverlayController(modal_state_policy()),
            modal_rules=[rule("/messages/:threadId", Render(View.DIRECT_MESSAGES))],
        )
        resolver.resolve(_loc("/explore"), ALICE)
        result = resolver.resolve(_loc("/messages/t1", modal=True), ALICE)
        assert result.overlay == RenderView(View.DIRECT_MESSAGES, {"threadId": "t1"})
