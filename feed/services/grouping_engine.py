"""Grouping of notification records into feed rows.

Records are partitioned by a key derived from their type and subject:

- every ``followed`` record shares the key ``"followed"``;
- ``rec_given``, ``comment`` and ``tagged`` records are keyed per thing as
  ``"{type}_{thingId}"``, with a missing thing collapsed into ``"unknown"``;
- any other type is keyed by the record's own ID and stays a singleton.

Members are ordered newest first and groups by their newest member. Ties on
``created_at`` are broken by ID, descending, so the output never depends on
input order.
"""

from collections.abc import Iterable, Sequence

from feed.constants import FOLLOWED_GROUP_KEY, UNKNOWN_SUBJECT
from feed.enums import NotificationType
from feed.schemas.notification import NotificationGroup, NotificationRecord

THING_GROUPED_TYPES = frozenset(
    {
        NotificationType.REC_GIVEN,
        NotificationType.COMMENT,
        NotificationType.TAGGED,
    }
)


def group_key(record: NotificationRecord) -> str:
    """Return the key of the group a record belongs to."""
    if record.type is NotificationType.FOLLOWED:
        return FOLLOWED_GROUP_KEY
    if record.type in THING_GROUPED_TYPES:
        return f"{record.type.value}_{record.thing_id or UNKNOWN_SUBJECT}"
    return record.id


def recency_key(record: NotificationRecord) -> tuple:
    """Sort key placing newer records (then larger IDs) last."""
    return (record.created_at, record.id)


def group_notifications(
    records: Iterable[NotificationRecord],
) -> list[NotificationGroup]:
    """Group records by key, newest group first.

    Args:
        records: Records in any order. May be empty.

    Returns:
        One NotificationGroup per distinct key.
    """
    partitions: dict[str, list[NotificationRecord]] = {}
    for record in records:
        partitions.setdefault(group_key(record), []).append(record)

    groups = [
        NotificationGroup(
            group_key=key,
            members=tuple(sorted(members, key=recency_key, reverse=True)),
        )
        for key, members in partitions.items()
    ]
    groups.sort(key=lambda group: recency_key(group.most_recent), reverse=True)
    return groups


def flatten_members(groups: Sequence[NotificationGroup]) -> list[NotificationRecord]:
    """Return the records of all groups, in group then member order."""
    return [member for group in groups for member in group.members]
