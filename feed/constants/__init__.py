"""Constants package for the feed app."""

from feed.constants.feed import (
    FOLLOWED_GROUP_KEY,
    PAGE_SIZE,
    PULL_DISTANCE_MAX,
    PULL_REFRESH_THRESHOLD,
    SCROLL_LOOKAHEAD_MARGIN,
    THING_TITLE_FALLBACK,
    UNKNOWN_SUBJECT,
)
from feed.constants.http import REQUEST_ID_HEADER

__all__ = [
    "FOLLOWED_GROUP_KEY",
    "PAGE_SIZE",
    "PULL_DISTANCE_MAX",
    "PULL_REFRESH_THRESHOLD",
    "REQUEST_ID_HEADER",
    "SCROLL_LOOKAHEAD_MARGIN",
    "THING_TITLE_FALLBACK",
    "UNKNOWN_SUBJECT",
]
