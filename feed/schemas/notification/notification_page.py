"""Schema for one page of notifications returned by a store."""

from pydantic import Field, computed_field

from feed.schemas.base_schema_model import BaseSchemaModel
from feed.schemas.notification.notification_record import NotificationRecord


class NotificationPage(BaseSchemaModel):
    """A page of records, newest first, plus the cursor for the next page."""

    items: list[NotificationRecord] = Field(default_factory=list)
    next_cursor: str | None = Field(
        default=None, description="Cursor for the following page, None at the end"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None
