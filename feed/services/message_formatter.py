"""Display strings for notification groups.

Everything here is pure and total: a record with missing fields degrades to a
documented fallback instead of raising.
"""

from datetime import UTC, datetime

from feed.constants import THING_TITLE_FALLBACK
from feed.enums import GroupAction, NotificationType
from feed.schemas.notification import FeedGroupRow, NotificationGroup

NOTIFICATION_ICONS: dict[NotificationType, str] = {
    NotificationType.TAGGED: "🏷️",
    NotificationType.REC_GIVEN: "🎁",
    NotificationType.COMMENT: "💬",
    NotificationType.FOLLOWED: "👥",
}
DEFAULT_ICON = "🔔"

# Sentence endings for grouped messages, by type of the most recent member
VERB_PHRASES: dict[NotificationType, str] = {
    NotificationType.FOLLOWED: "started following you",
    NotificationType.REC_GIVEN: 'completed "{thing_title}"',
    NotificationType.COMMENT: 'commented on "{thing_title}"',
    NotificationType.TAGGED: 'tagged you in "{thing_title}"',
}

GROUP_ACTIONS: dict[NotificationType, GroupAction] = {
    NotificationType.FOLLOWED: GroupAction.FOLLOW_BACK,
    NotificationType.REC_GIVEN: GroupAction.VIEW,
    NotificationType.COMMENT: GroupAction.VIEW,
    NotificationType.TAGGED: GroupAction.VIEW,
}


def _verb_phrase(group: NotificationGroup) -> str | None:
    most_recent = group.most_recent
    template = VERB_PHRASES.get(most_recent.type)
    if template is None:
        return None
    return template.format(thing_title=most_recent.thing_title or THING_TITLE_FALLBACK)


def actor_names(group: NotificationGroup) -> list[str]:
    """Distinct non-empty actor names across members, first seen first."""
    names: list[str] = []
    for member in group.members:
        name = member.actor_name
        if name and name not in names:
            names.append(name)
    return names


def format_group_message(group: NotificationGroup) -> str:
    """Build the summary line for a group.

    A single-record group shows its own message. Larger groups name up to two
    actors and count the remaining distinct actors, e.g.
    ``Ann, Bo, and 1 others started following you``. Types without a verb
    phrase, or groups without any actor names, fall back to the most recent
    message.
    """
    fallback = group.most_recent.message
    if group.total_count == 1:
        return fallback

    verb_phrase = _verb_phrase(group)
    names = actor_names(group)
    if verb_phrase is None or not names:
        return fallback

    if len(names) == 1:
        return f"{names[0]} {verb_phrase}"
    if len(names) == 2:
        return f"{names[0]} and {names[1]} {verb_phrase}"
    return f"{names[0]}, {names[1]}, and {len(names) - 2} others {verb_phrase}"


def format_relative_time(created_at: datetime, now: datetime | None = None) -> str:
    """Age label for a timestamp: Just now, 5m ago, 3h ago, 2d ago or M/D/YYYY."""
    now = now or datetime.now(UTC)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)

    elapsed = (now - created_at).total_seconds()
    minutes = int(elapsed // 60)
    hours = int(elapsed // 3600)
    days = int(elapsed // 86400)

    if hours < 1:
        return "Just now" if minutes < 1 else f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return f"{created_at.month}/{created_at.day}/{created_at.year}"


def notification_icon(notification_type: NotificationType) -> str:
    return NOTIFICATION_ICONS.get(notification_type, DEFAULT_ICON)


def group_action(group: NotificationGroup) -> GroupAction | None:
    """Secondary action offered on the group's row, if any."""
    return GROUP_ACTIONS.get(group.most_recent.type)


def render_group(group: NotificationGroup, now: datetime | None = None) -> FeedGroupRow:
    """Turn a group into a display-ready feed row."""
    most_recent = group.most_recent
    unread_count = group.unread_count

    return FeedGroupRow(
        group_key=group.group_key,
        type=most_recent.type,
        icon=notification_icon(most_recent.type),
        title=most_recent.title,
        message=format_group_message(group),
        total_count=group.total_count,
        unread_count=unread_count,
        unread_label=f"{unread_count} new" if unread_count else None,
        created_at=most_recent.created_at,
        relative_time=format_relative_time(most_recent.created_at, now),
        action=group_action(group),
        actor_id=most_recent.actor_id,
        subject_id=most_recent.post_id or most_recent.thing_id,
        member_ids=group.member_ids,
    )
