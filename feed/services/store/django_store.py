"""Notification store backed by the Django ORM."""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

import structlog
from django.db import DatabaseError
from django.db.models import Q

from feed.constants import PAGE_SIZE
from feed.enums import TagStatus
from feed.exceptions import NotFound, StoreUnavailable
from feed.models import Notification, Tag, UserFollow
from feed.schemas.notification import NotificationPage
from feed.schemas.tag import TagRecord
from feed.services.store.base_store_client import NotificationStoreClient

logger = structlog.get_logger(__name__)

CURSOR_SEPARATOR = "|"


@contextmanager
def _store_errors(operation: str, **context: Any) -> Iterator[None]:
    """Translate database failures into StoreUnavailable."""
    try:
        yield
    except DatabaseError as e:
        logger.error(
            "Notification store database error",
            operation=operation,
            error=str(e),
            **context,
        )
        raise StoreUnavailable(operation=operation, message=str(e)) from e


def _as_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class DjangoNotificationStore(NotificationStoreClient):
    """Store client reading and writing the feed models through the async ORM.

    Pages use a keyset cursor over ``(created_at, notification_id)``, the same
    order the grouping engine sorts by, so concurrent inserts never shift a
    page boundary.
    """

    async def fetch_notifications(
        self,
        user_id: str,
        cursor: str | None = None,
        limit: int = PAGE_SIZE,
    ) -> NotificationPage:
        recipient_id = _as_uuid(user_id)
        if recipient_id is None:
            logger.warning("Fetch for invalid user id", user_id=user_id)
            return NotificationPage()

        queryset = Notification.objects.filter(user_id=recipient_id).order_by(
            "-created_at", "-notification_id"
        )
        position = self.decode_cursor(cursor)
        if position is not None:
            created_at, notification_id = position
            queryset = queryset.filter(
                Q(created_at__lt=created_at)
                | Q(created_at=created_at, notification_id__lt=notification_id)
            )

        with _store_errors("fetch_notifications", user_id=user_id):
            rows = [row async for row in queryset[: limit + 1]]

        has_more = len(rows) > limit
        rows = rows[:limit]
        next_cursor = self.encode_cursor(rows[-1]) if has_more and rows else None

        items = self.parse_records(self._to_document(row) for row in rows)
        logger.info(
            "Fetched notification page",
            user_id=user_id,
            count=len(items),
            has_more=next_cursor is not None,
        )
        return NotificationPage(items=items, next_cursor=next_cursor)

    async def mark_one_read(self, notification_id: str) -> None:
        target_id = _as_uuid(notification_id)
        if target_id is None:
            logger.warning(
                "Mark read for invalid notification id",
                notification_id=notification_id,
            )
            return

        with _store_errors("mark_one_read", notification_id=notification_id):
            matched = await Notification.objects.filter(
                notification_id=target_id
            ).aupdate(read=True)

        if not matched:
            logger.warning(
                "Mark read matched no notification", notification_id=notification_id
            )

    async def mark_all_read(self, user_id: str) -> None:
        recipient_id = _as_uuid(user_id)
        if recipient_id is None:
            logger.warning("Mark all read for invalid user id", user_id=user_id)
            return

        with _store_errors("mark_all_read", user_id=user_id):
            updated = await Notification.objects.filter(
                user_id=recipient_id, read=False
            ).aupdate(read=True)

        logger.info("Marked all notifications read", user_id=user_id, count=updated)

    async def follow_user(self, actor_id: str, target_id: str) -> None:
        follower_id = _as_uuid(actor_id)
        followee_id = _as_uuid(target_id)
        if follower_id is None or followee_id is None:
            raise NotFound(
                resource="user",
                resource_id=target_id if follower_id else actor_id,
            )

        with _store_errors("follow_user", actor_id=actor_id, target_id=target_id):
            _, created = await UserFollow.objects.aget_or_create(
                follower_id=follower_id, followee_id=followee_id
            )
        logger.info(
            "Follow recorded", actor_id=actor_id, target_id=target_id, created=created
        )

    async def get_tag(self, tag_id: str) -> TagRecord:
        key = _as_uuid(tag_id)
        if key is None:
            raise NotFound(resource="tag", resource_id=tag_id)

        with _store_errors("get_tag", tag_id=tag_id):
            try:
                tag = await Tag.objects.select_related("tagger").aget(tag_id=key)
            except Tag.DoesNotExist as err:
                logger.warning("Tag not found", tag_id=tag_id)
                raise NotFound(resource="tag", resource_id=tag_id) from err

        return TagRecord(
            id=str(tag.tag_id),
            thing_id=tag.thing_id,
            thing_title=tag.thing_title,
            tagger_id=str(tag.tagger_id),
            tagger_name=str(tag.tagger),
            tagged_user_id=str(tag.tagged_user_id),
            state=tag.state,
            rating=tag.rating,
            status=tag.status,
        )

    async def accept_tag(self, tag_id: str, user_id: str) -> bool:
        return await self._answer_tag(tag_id, user_id, TagStatus.ACCEPTED)

    async def decline_tag(self, tag_id: str, user_id: str) -> bool:
        return await self._answer_tag(tag_id, user_id, TagStatus.DECLINED)

    async def _answer_tag(self, tag_id: str, user_id: str, answer: TagStatus) -> bool:
        key = _as_uuid(tag_id)
        recipient_id = _as_uuid(user_id)
        if key is None or recipient_id is None:
            return False

        with _store_errors("answer_tag", tag_id=tag_id, answer=answer.value):
            updated = await Tag.objects.filter(
                tag_id=key,
                tagged_user_id=recipient_id,
                status=TagStatus.PENDING.value,
            ).aupdate(status=answer.value)

        logger.info(
            "Tag answered", tag_id=tag_id, answer=answer.value, updated=bool(updated)
        )
        return updated == 1

    @staticmethod
    def encode_cursor(row: Notification) -> str:
        return f"{row.created_at.isoformat()}{CURSOR_SEPARATOR}{row.notification_id}"

    @staticmethod
    def decode_cursor(cursor: str | None) -> tuple[datetime, uuid.UUID] | None:
        """Split a cursor into its position; None for no or unreadable cursor."""
        if not cursor:
            return None
        created_part, _, id_part = cursor.rpartition(CURSOR_SEPARATOR)
        try:
            return datetime.fromisoformat(created_part), uuid.UUID(id_part)
        except ValueError:
            logger.warning("Ignoring unreadable cursor", cursor=cursor)
            return None

    @staticmethod
    def _to_document(row: Notification) -> dict[str, Any]:
        return {
            "id": str(row.notification_id),
            "type": row.notification_type,
            "title": row.title,
            "message": row.message,
            "read": row.read,
            "createdAt": row.created_at,
            "data": row.data,
        }
