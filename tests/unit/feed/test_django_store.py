"""Unit tests for DjangoNotificationStore."""

import uuid
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, patch

from django.db import OperationalError
from django.test import TestCase

from feed.enums import NotificationType, TagStatus
from feed.exceptions import NotFound, StoreUnavailable
from feed.models import Notification, Tag, User, UserFollow
from feed.services.store import DjangoNotificationStore

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class DjangoStoreTestCase(TestCase):
    """Shared data: a recipient with five notifications and a pending tag."""

    @classmethod
    def setUpTestData(cls):
        cls.me = User.objects.create(username="me", name="Me")
        cls.ann = User.objects.create(username="ann", name="Ann")
        cls.notifications = [
            Notification.objects.create(
                user=cls.me,
                notification_type=NotificationType.COMMENT.value,
                title="New comment",
                message=f"comment {i}",
                data={"fromUserId": str(cls.ann.user_id), "fromUserName": "Ann",
                      "thingId": "t1", "thingTitle": "Dune"},
                created_at=BASE_TIME - timedelta(minutes=i),
            )
            for i in range(5)
        ]
        cls.tag = Tag.objects.create(
            tagger=cls.ann, tagged_user=cls.me, thing_id="t1", thing_title="Dune"
        )

    def setUp(self):
        self.store = DjangoNotificationStore()
        self.user_id = str(self.me.user_id)


class TestFetchNotifications(DjangoStoreTestCase):
    """Tests for paging through notifications."""

    async def test_pages_follow_keyset_cursor(self):
        first = await self.store.fetch_notifications(self.user_id, limit=2)
        second = await self.store.fetch_notifications(
            self.user_id, cursor=first.next_cursor, limit=2
        )
        third = await self.store.fetch_notifications(
            self.user_id, cursor=second.next_cursor, limit=2
        )

        ids = [record.id for page in (first, second, third) for record in page.items]
        self.assertEqual(
            ids, [str(n.notification_id) for n in self.notifications]
        )
        self.assertTrue(first.has_more)
        self.assertIsNone(third.next_cursor)

    async def test_records_are_parsed_with_payload(self):
        page = await self.store.fetch_notifications(self.user_id, limit=1)

        (record,) = page.items
        self.assertIs(record.type, NotificationType.COMMENT)
        self.assertEqual(record.thing_id, "t1")
        self.assertEqual(record.actor_name, "Ann")
        self.assertEqual(record.created_at, BASE_TIME)

    async def test_malformed_rows_are_dropped(self):
        await Notification.objects.filter(
            notification_id=self.notifications[0].notification_id
        ).aupdate(notification_type="carrier_pigeon")

        page = await self.store.fetch_notifications(self.user_id, limit=10)

        self.assertEqual(len(page.items), 4)

    async def test_unreadable_cursor_starts_from_the_top(self):
        page = await self.store.fetch_notifications(
            self.user_id, cursor="not-a-cursor", limit=1
        )

        self.assertEqual(page.items[0].id, str(self.notifications[0].notification_id))

    async def test_invalid_user_id_gives_empty_page(self):
        page = await self.store.fetch_notifications("nobody")

        self.assertEqual(page.items, [])
        self.assertFalse(page.has_more)


class TestReadWrites(DjangoStoreTestCase):
    """Tests for mark_one_read and mark_all_read."""

    async def test_mark_one_read_is_idempotent(self):
        target = str(self.notifications[1].notification_id)

        await self.store.mark_one_read(target)
        await self.store.mark_one_read(target)

        self.assertTrue(
            (await Notification.objects.aget(notification_id=target)).read
        )
        self.assertEqual(
            await Notification.objects.filter(read=True).acount(), 1
        )

    async def test_mark_one_read_ignores_unknown_ids(self):
        await self.store.mark_one_read(str(uuid.uuid4()))
        await self.store.mark_one_read("garbage")

        self.assertEqual(await Notification.objects.filter(read=True).acount(), 0)

    async def test_mark_all_read(self):
        await self.store.mark_all_read(self.user_id)

        self.assertEqual(await Notification.objects.filter(read=False).acount(), 0)

    async def test_database_error_becomes_store_unavailable(self):
        queryset = MagicMock()
        queryset.aupdate = AsyncMock(side_effect=OperationalError("server closed"))

        with patch.object(Notification.objects, "filter", return_value=queryset):
            with self.assertRaises(StoreUnavailable) as ctx:
                await self.store.mark_all_read(self.user_id)

        self.assertEqual(ctx.exception.operation, "mark_all_read")


class TestFollowUser(DjangoStoreTestCase):
    """Tests for follow_user."""

    async def test_follow_is_idempotent(self):
        await self.store.follow_user(self.user_id, str(self.ann.user_id))
        await self.store.follow_user(self.user_id, str(self.ann.user_id))

        self.assertEqual(
            await UserFollow.objects.filter(
                follower_id=self.me.user_id, followee_id=self.ann.user_id
            ).acount(),
            1,
        )

    async def test_invalid_target_raises_not_found(self):
        with self.assertRaises(NotFound):
            await self.store.follow_user(self.user_id, "not-a-uuid")


class TestTags(DjangoStoreTestCase):
    """Tests for get_tag, accept_tag and decline_tag."""

    async def test_get_tag(self):
        tag = await self.store.get_tag(str(self.tag.tag_id))

        self.assertEqual(tag.thing_title, "Dune")
        self.assertEqual(tag.tagger_name, "Ann")
        self.assertTrue(tag.is_pending)

    async def test_get_missing_tag_raises_not_found(self):
        with self.assertRaises(NotFound) as ctx:
            await self.store.get_tag(str(uuid.uuid4()))

        self.assertEqual(ctx.exception.resource, "tag")

    async def test_accept_then_decline(self):
        tag_id = str(self.tag.tag_id)

        self.assertTrue(await self.store.accept_tag(tag_id, self.user_id))
        self.assertFalse(await self.store.decline_tag(tag_id, self.user_id))

        tag = await Tag.objects.aget(tag_id=self.tag.tag_id)
        self.assertEqual(tag.status, TagStatus.ACCEPTED.value)

    async def test_only_the_tagged_user_can_answer(self):
        self.assertFalse(
            await self.store.decline_tag(str(self.tag.tag_id), str(self.ann.user_id))
        )
