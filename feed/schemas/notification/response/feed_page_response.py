"""Schema for the grouped feed endpoint response."""

from pydantic import Field

from feed.schemas.base_schema_model import BaseSchemaModel
from feed.schemas.notification.response.feed_group_row import FeedGroupRow


class FeedPageResponse(BaseSchemaModel):
    """Grouped rows for one store page."""

    groups: list[FeedGroupRow] = Field(default_factory=list)
    unread_total: int = Field(..., ge=0, description="Unread records on this page")
    next_cursor: str | None = Field(default=None)
