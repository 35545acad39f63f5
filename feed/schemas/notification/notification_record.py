"""Schema for a single notification record."""

from datetime import UTC, datetime
from typing import Any

from pydantic import ConfigDict, Field, SerializeAsAny, field_validator, model_validator

from feed.enums import NotificationType
from feed.schemas.base_schema_model import BaseSchemaModel
from feed.schemas.notification.notification_data import (
    NOTIFICATION_DATA_MODELS,
    NotificationData,
    PostLikedData,
    TaggedData,
    ThingActivityData,
)


class NotificationRecord(BaseSchemaModel):
    """One notification as fetched from the store.

    Records are frozen; the only transition is ``read`` going from False to
    True, done by building a copy with :meth:`as_read`. The ``data`` payload
    is narrowed to the variant matching ``type`` during validation.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    id: str = Field(..., min_length=1, description="Opaque notification identifier")
    type: NotificationType = Field(..., description="Kind of activity")
    read: bool = Field(default=False, description="Whether the user has read it")
    created_at: datetime = Field(..., description="When the event happened")
    title: str = Field(default="", description="Precomputed display title")
    message: str = Field(default="", description="Precomputed display message")
    data: SerializeAsAny[NotificationData] = Field(
        default_factory=NotificationData,
        description="Cross references to subject, post, tag and actor",
    )

    @model_validator(mode="before")
    @classmethod
    def _narrow_data(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        data = values.get("data")
        if data is not None and not isinstance(data, dict):
            return values
        try:
            data_model = NOTIFICATION_DATA_MODELS[NotificationType(values.get("type"))]
        except ValueError:
            # Unknown type: left for field validation to report
            return values
        return {**values, "data": data_model.model_validate(data or {})}

    @field_validator("title", "message", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def as_read(self) -> "NotificationRecord":
        """Return this record with ``read`` set; unchanged if already read."""
        if self.read:
            return self
        return self.model_copy(update={"read": True})

    @property
    def actor_id(self) -> str | None:
        return self.data.from_user_id or None

    @property
    def actor_name(self) -> str | None:
        return self.data.from_user_name or None

    @property
    def thing_id(self) -> str | None:
        if isinstance(self.data, ThingActivityData):
            return self.data.thing_id or None
        return None

    @property
    def thing_title(self) -> str | None:
        if isinstance(self.data, ThingActivityData):
            return self.data.thing_title or None
        return None

    @property
    def post_id(self) -> str | None:
        if isinstance(self.data, (ThingActivityData, PostLikedData)):
            return self.data.post_id or None
        return None

    @property
    def tag_id(self) -> str | None:
        if isinstance(self.data, TaggedData):
            return self.data.tag_id or None
        return None
