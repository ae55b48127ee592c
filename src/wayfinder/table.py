"""The application's routing table.

Order is significant: the matcher takes the first structural match, so
literal and fixed-keyword rules come before the community catch-alls. A
community named ``explore`` can never shadow ``/explore``.
"""

from wayfinder.config import RouterConfig
from wayfinder.routing.matcher import rule
from wayfinder.routing.redirects import RedirectTable
from wayfinder.routing.route import PathRule
from wayfinder.targets import AccountShortcut, Redirect, Render, SignedOutFallback
from wayfinder.views import View

MARKETING_ALIASES = ("/home", "/about", "/contact", "/support", "/faq", "/features", "/new")
STATIC_PAGES = ("/terms", "/privacy", "/terms.html", "/privacy.html", "/code-of-conduct")


def thread_pattern(config: RouterConfig) -> str:
    """``/:communitySlug/:channelSlug/(slug~)?:threadId`` for the configured delimiter."""
    return f"/:communitySlug/:channelSlug/(slug{config.delimiter})?:threadId"


def build_redirects(config: RouterConfig) -> RedirectTable:
    """Exact-path aliases, checked before any view rule."""
    aliases = {"/": config.landing_path}
    aliases.update(dict.fromkeys(MARKETING_ALIASES, config.landing_path))
    aliases["/users"] = config.landing_path
    aliases["/thread"] = "/"
    return RedirectTable(aliases, case_sensitive=config.case_sensitive)


def build_rules(config: RouterConfig) -> tuple[PathRule, ...]:
    """The main switch, in priority order."""
    cs = config.case_sensitive
    login = Render(View.LOGIN)

    rules: list[PathRule] = [rule(page, Render(View.PAGES), case_sensitive=cs) for page in STATIC_PAGES]
    rules += [
        # App pages
        rule("/login", SignedOutFallback(authed=Redirect("/"), anonymous=login), case_sensitive=cs),
        rule("/explore", Render(View.EXPLORE), case_sensitive=cs),
        rule(
            "/messages/:threadId",
            SignedOutFallback(Render(View.DIRECT_MESSAGES), login, return_to="/messages"),
            case_sensitive=cs,
        ),
        rule(
            "/messages",
            SignedOutFallback(Render(View.DIRECT_MESSAGES), login, return_to="/messages"),
            case_sensitive=cs,
        ),
        rule("/thread/:threadId", Render(View.OLD_THREAD_REDIRECT), case_sensitive=cs),
        rule("/thread", Redirect("/"), case_sensitive=cs),
        # Users
        rule("/users", Redirect(config.landing_path), exact=True, case_sensitive=cs),
        rule("/users/:username", Render(View.USER), exact=True, case_sensitive=cs),
        rule(
            "/users/:username/settings",
            SignedOutFallback(Render(View.USER_SETTINGS), login, return_to="/me/settings"),
            exact=True,
            case_sensitive=cs,
        ),
        # Account shortcuts
        rule(
            "/me/settings",
            AccountShortcut(profile_path="/users/{username}/settings", return_to="/me/settings"),
            case_sensitive=cs,
        ),
        rule("/me", AccountShortcut(profile_path="/users/{username}", return_to="/me"), case_sensitive=cs),
        # Community catch-alls, most specific first
        rule(
            "/:communitySlug/:channelSlug/settings",
            SignedOutFallback(Render(View.CHANNEL_SETTINGS), login),
            case_sensitive=cs,
        ),
        rule(
            "/:communitySlug/settings",
            SignedOutFallback(Render(View.COMMUNITY_SETTINGS), login),
            case_sensitive=cs,
        ),
        rule("/:communitySlug/login", Redirect(config.landing_path), case_sensitive=cs),
        rule(thread_pattern(config), Render(View.THREAD), case_sensitive=cs),
        rule("/:communitySlug/:channelSlug", Render(View.CHANNEL), case_sensitive=cs),
        rule("/:communitySlug", Render(View.COMMUNITY), case_sensitive=cs),
    ]
    return tuple(rules)


def build_modal_rules(config: RouterConfig) -> tuple[PathRule, ...]:
    """Secondary routes rendered on top of the background while a modal is open."""
    return (
        rule(thread_pattern(config), Render(View.THREAD_SLIDER), case_sensitive=config.case_sensitive),
        rule("/thread/:threadId", Render(View.OLD_THREAD_REDIRECT), case_sensitive=config.case_sensitive),
    )
