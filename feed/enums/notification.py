"""Notification-related enumerations."""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of social activity a user is notified about.

    The type decides how a record is grouped, which payload variant its
    ``data`` carries, and which sentence the grouped message uses.
    """

    TAGGED = "tagged"
    REC_GIVEN = "rec_given"
    COMMENT = "comment"
    POST_LIKED = "post_liked"
    FOLLOWED = "followed"


class GroupAction(str, Enum):
    """Secondary action button shown on a feed row."""

    FOLLOW_BACK = "follow_back"
    VIEW = "view"
