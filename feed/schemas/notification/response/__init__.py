"""Response schemas for the feed REST layer."""

from feed.schemas.notification.response.feed_group_row import FeedGroupRow
from feed.schemas.notification.response.feed_page_response import FeedPageResponse

__all__ = ["FeedGroupRow", "FeedPageResponse"]
