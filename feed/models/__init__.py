"""Database models for the feed app."""

from feed.models.notification import Notification
from feed.models.tag import Tag
from feed.models.user import User
from feed.models.user_follow import UserFollow

__all__ = ["Notification", "Tag", "User", "UserFollow"]
