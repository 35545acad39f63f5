"""Notification schemas."""

from feed.schemas.notification.notification_data import (
    NOTIFICATION_DATA_MODELS,
    FollowedData,
    NotificationData,
    PostLikedData,
    TaggedData,
    ThingActivityData,
)
from feed.schemas.notification.notification_group import NotificationGroup
from feed.schemas.notification.notification_page import NotificationPage
from feed.schemas.notification.notification_record import NotificationRecord
from feed.schemas.notification.response import FeedGroupRow, FeedPageResponse

__all__ = [
    "NOTIFICATION_DATA_MODELS",
    "FeedGroupRow",
    "FeedPageResponse",
    "FollowedData",
    "NotificationData",
    "NotificationGroup",
    "NotificationPage",
    "NotificationRecord",
    "PostLikedData",
    "TaggedData",
    "ThingActivityData",
]
