"""Unit tests for TagAcceptanceFlow."""

from unittest.mock import AsyncMock

from django.test import SimpleTestCase

from feed.enums import TagStatus
from feed.schemas.tag import TagRecord
from feed.services.tag_acceptance import TagAcceptanceFlow
from tests.unit.feed.mocks import FakeNotificationStore


class TestTagAcceptanceFlow(SimpleTestCase):
    """Tests for loading and answering a tag."""

    def setUp(self):
        self.store = FakeNotificationStore()
        self.store.tags["tag-1"] = TagRecord(
            id="tag-1",
            thing_id="t1",
            thing_title="Dune",
            tagger_id="ann-id",
            tagger_name="Ann",
            tagged_user_id="me",
        )
        self.on_accepted = AsyncMock()
        self.flow = TagAcceptanceFlow(
            self.store, "tag-1", "me", on_accepted=self.on_accepted
        )

    async def test_load(self):
        tag = await self.flow.load()

        self.assertEqual(tag.thing_title, "Dune")
        self.assertTrue(self.flow.can_answer)
        self.assertFalse(self.flow.loading)

    async def test_missing_tag_sets_not_found(self):
        flow = TagAcceptanceFlow(self.store, "gone", "me")

        self.assertIsNone(await flow.load())

        self.assertTrue(flow.not_found)
        self.assertFalse(flow.load_failed)
        flow.dismiss()
        self.assertTrue(flow.closed)

    async def test_store_failure_sets_load_failed(self):
        self.store.fail_tags = True

        await self.flow.load()

        self.assertTrue(self.flow.load_failed)
        self.assertFalse(self.flow.not_found)

    async def test_accept_closes_flow_and_calls_back(self):
        await self.flow.load()

        self.assertTrue(await self.flow.accept())

        self.assertTrue(self.flow.closed)
        self.on_accepted.assert_awaited_once()
        self.assertEqual(self.store.tags["tag-1"].status, TagStatus.ACCEPTED)

    async def test_decline_does_not_call_back(self):
        await self.flow.load()

        self.assertTrue(await self.flow.decline())

        self.assertTrue(self.flow.closed)
        self.on_accepted.assert_not_awaited()
        self.assertEqual(self.store.tags["tag-1"].status, TagStatus.DECLINED)

    async def test_cannot_answer_before_load(self):
        self.assertFalse(await self.flow.accept())
        self.assertEqual(self.store.tag_answers, [])

    async def test_failed_answer_keeps_flow_open(self):
        await self.flow.load()
        self.store.fail_tags = True

        self.assertFalse(await self.flow.accept())

        self.assertFalse(self.flow.closed)
        self.assertFalse(self.flow.submitting)
        self.on_accepted.assert_not_awaited()

    async def test_already_answered_tag_cannot_be_answered(self):
        self.store.tags["tag-1"] = self.store.tags["tag-1"].model_copy(
            update={"status": TagStatus.DECLINED.value}
        )
        await self.flow.load()

        self.assertFalse(self.flow.can_answer)
        self.assertFalse(await self.flow.accept())
