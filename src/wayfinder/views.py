"""View selectors.

The presentation layer maps each selector to whatever actually renders it.
"""

from enum import StrEnum


class View(StrEnum):
    PAGES = "pages"
    LOGIN = "login"
    EXPLORE = "explore"
    DIRECT_MESSAGES = "direct_messages"
    OLD_THREAD_REDIRECT = "old_thread_redirect"
    USER = "user"
    USER_SETTINGS = "user_settings"
    NEW_USER_ONBOARDING = "new_user_onboarding"
    COMMUNITY = "community"
    COMMUNITY_SETTINGS = "community_settings"
    CHANNEL = "channel"
    CHANNEL_SETTINGS = "channel_settings"
    THREAD = "thread"
    THREAD_SLIDER = "thread_slider"
