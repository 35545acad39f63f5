"""Per-type payload variants carried in a notification's ``data`` field."""

from feed.enums import NotificationType
from feed.schemas.base_schema_model import BaseSchemaModel


class NotificationData(BaseSchemaModel):
    """Fields every notification payload may carry: the acting user."""

    from_user_id: str | None = None
    from_user_name: str | None = None


class FollowedData(NotificationData):
    """Payload of a ``followed`` notification."""


class PostLikedData(NotificationData):
    """Payload of a ``post_liked`` notification."""

    post_id: str | None = None


class ThingActivityData(NotificationData):
    """Payload of notifications about a thing (``rec_given``, ``comment``)."""

    thing_id: str | None = None
    thing_title: str | None = None
    post_id: str | None = None


class TaggedData(ThingActivityData):
    """Payload of a ``tagged`` notification, pointing at the pending tag."""

    tag_id: str | None = None


NOTIFICATION_DATA_MODELS: dict[NotificationType, type[NotificationData]] = {
    NotificationType.FOLLOWED: FollowedData,
    NotificationType.POST_LIKED: PostLikedData,
    NotificationType.REC_GIVEN: ThingActivityData,
    NotificationType.COMMENT: ThingActivityData,
    NotificationType.TAGGED: TaggedData,
}
