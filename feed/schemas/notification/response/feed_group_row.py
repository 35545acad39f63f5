"""Schema for one rendered feed row."""

from datetime import datetime

from pydantic import Field

from feed.enums import GroupAction, NotificationType
from feed.schemas.base_schema_model import BaseSchemaModel


class FeedGroupRow(BaseSchemaModel):
    """Display-ready form of a NotificationGroup."""

    group_key: str = Field(..., description="Key of the underlying group")
    type: NotificationType = Field(..., description="Type of the most recent member")
    icon: str = Field(..., description="Emoji shown next to the row")
    title: str = Field(..., description="Title of the most recent member")
    message: str = Field(..., description="Grouped, pluralized summary")
    total_count: int = Field(..., ge=1)
    unread_count: int = Field(..., ge=0)
    unread_label: str | None = Field(
        default=None, description='"N new" badge text, absent when all read'
    )
    created_at: datetime = Field(..., description="Time of the most recent member")
    relative_time: str = Field(..., description="Age label such as 5m ago")
    action: GroupAction | None = Field(
        default=None, description="Secondary action button, if any"
    )
    actor_id: str | None = Field(default=None, description="Most recent actor")
    subject_id: str | None = Field(
        default=None, description="Post or thing the row navigates to"
    )
    member_ids: list[str] = Field(default_factory=list)
