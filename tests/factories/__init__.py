"""Builders for feed test data.

Records are built through the same camelCase document shape the stores
produce, so every factory output also passes through schema validation.
Omitted actor names are filled with Faker; pass ``actor_name=""`` for a record
without one.
"""

import uuid
from datetime import UTC, datetime, timedelta

from faker import Faker

from feed.enums import NotificationType
from feed.schemas.notification import NotificationGroup, NotificationRecord
from feed.services.grouping_engine import group_notifications

fake = Faker()

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def make_document(
    record_id=None,
    notification_type=NotificationType.FOLLOWED,
    read=False,
    minutes_ago=0,
    created_at=None,
    actor_id=None,
    actor_name=None,
    thing_id=None,
    thing_title=None,
    post_id=None,
    tag_id=None,
    title="",
    message=None,
):
    """Build a raw notification document as a store would return it."""
    notification_type = NotificationType(notification_type)
    data = {
        "fromUserId": actor_id or str(uuid.uuid4()),
        "fromUserName": fake.first_name() if actor_name is None else actor_name,
    }
    if thing_id is not None:
        data["thingId"] = thing_id
    if thing_title is not None:
        data["thingTitle"] = thing_title
    if post_id is not None:
        data["postId"] = post_id
    if tag_id is not None:
        data["tagId"] = tag_id

    return {
        "id": record_id or str(uuid.uuid4()),
        "type": notification_type.value,
        "read": read,
        "createdAt": (created_at or BASE_TIME - timedelta(minutes=minutes_ago)).isoformat(),
        "title": title,
        "message": fake.sentence() if message is None else message,
        "data": data,
    }


def make_record(**kwargs) -> NotificationRecord:
    """Build a validated NotificationRecord; accepts make_document arguments."""
    return NotificationRecord.model_validate(make_document(**kwargs))


def make_group(*records: NotificationRecord) -> NotificationGroup:
    """Group records that share a key and return that single group."""
    groups = group_notifications(records)
    assert len(groups) == 1, f"records fall into {len(groups)} groups"
    return groups[0]
