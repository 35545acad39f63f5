"""Enumerations for the feed app."""

from feed.enums.feed_session import FeedState, HapticPattern
from feed.enums.notification import GroupAction, NotificationType
from feed.enums.tag import TagState, TagStatus

__all__ = [
    "FeedState",
    "GroupAction",
    "HapticPattern",
    "NotificationType",
    "TagState",
    "TagStatus",
]
