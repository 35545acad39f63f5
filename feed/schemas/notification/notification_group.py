"""Schema for a group of notifications shown as one feed row."""

from pydantic import ConfigDict, Field, computed_field

from feed.schemas.base_schema_model import BaseSchemaModel
from feed.schemas.notification.notification_record import NotificationRecord


class NotificationGroup(BaseSchemaModel):
    """Notifications sharing a group key, newest first.

    Groups are recomputed from the record list on every change and never
    persisted. Counts are derived from ``members`` on access.
    """

    model_config = ConfigDict(frozen=True)

    group_key: str = Field(..., description="Deterministic key from type and subject")
    members: tuple[NotificationRecord, ...] = Field(
        ..., min_length=1, description="Member records, newest first"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def most_recent(self) -> NotificationRecord:
        return self.members[0]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_count(self) -> int:
        return len(self.members)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def unread_count(self) -> int:
        return sum(1 for member in self.members if not member.read)

    @property
    def has_unread(self) -> bool:
        return any(not member.read for member in self.members)

    @property
    def member_ids(self) -> list[str]:
        return [member.id for member in self.members]
