"""Unit tests for DocumentStoreClient."""

import requests
import responses
from django.test import SimpleTestCase
from responses import matchers

from feed.exceptions import NotFound, StoreError, StoreUnavailable
from feed.services.store import DocumentStoreClient
from tests.factories import make_document

BASE_URL = "http://document-store.test/api/v1/documents"


class TestDocumentStoreClient(SimpleTestCase):
    """Tests for the HTTP store client."""

    def setUp(self):
        self.client = DocumentStoreClient(base_url=BASE_URL, timeout=2)

    @responses.activate
    async def test_fetch_notifications(self):
        documents = [make_document(record_id="n-1"), make_document(record_id="n-2")]
        responses.add(
            responses.GET,
            f"{BASE_URL}/users/u1/notifications",
            json={"notifications": documents, "nextCursor": "c2"},
            match=[matchers.query_param_matcher({"limit": "20", "cursor": "c1"})],
        )

        page = await self.client.fetch_notifications("u1", cursor="c1")

        self.assertEqual([record.id for record in page.items], ["n-1", "n-2"])
        self.assertEqual(page.next_cursor, "c2")

    @responses.activate
    async def test_malformed_documents_are_dropped(self):
        broken = make_document(record_id="n-2")
        del broken["createdAt"]
        responses.add(
            responses.GET,
            f"{BASE_URL}/users/u1/notifications",
            json={
                "notifications": [make_document(record_id="n-1"), broken, "junk"],
                "nextCursor": None,
            },
        )

        page = await self.client.fetch_notifications("u1")

        self.assertEqual([record.id for record in page.items], ["n-1"])
        self.assertFalse(page.has_more)

    @responses.activate
    async def test_unknown_user_gives_empty_page(self):
        responses.add(
            responses.GET, f"{BASE_URL}/users/u1/notifications", status=404
        )

        page = await self.client.fetch_notifications("u1")

        self.assertEqual(page.items, [])

    @responses.activate
    async def test_server_error_raises_store_unavailable(self):
        responses.add(
            responses.GET, f"{BASE_URL}/users/u1/notifications", status=503
        )

        with self.assertRaises(StoreUnavailable) as ctx:
            await self.client.fetch_notifications("u1")

        self.assertEqual(ctx.exception.status_code, 503)

    @responses.activate
    async def test_connection_error_raises_store_unavailable(self):
        responses.add(
            responses.POST,
            f"{BASE_URL}/notifications/n-1/read",
            body=requests.ConnectionError("refused"),
        )

        with self.assertRaises(StoreUnavailable):
            await self.client.mark_one_read("n-1")

    @responses.activate
    async def test_invalid_json_raises_store_error(self):
        responses.add(
            responses.GET,
            f"{BASE_URL}/users/u1/notifications",
            body="<html>",
            status=200,
        )

        with self.assertRaises(StoreError):
            await self.client.fetch_notifications("u1")

    @responses.activate
    async def test_mark_one_read_tolerates_missing_notification(self):
        responses.add(
            responses.POST, f"{BASE_URL}/notifications/n-1/read", status=404
        )

        await self.client.mark_one_read("n-1")

        self.assertEqual(len(responses.calls), 1)

    @responses.activate
    async def test_mark_all_read_client_error_raises(self):
        responses.add(
            responses.POST,
            f"{BASE_URL}/users/u1/notifications/read-all",
            status=404,
        )

        with self.assertRaises(StoreError):
            await self.client.mark_all_read("u1")

    @responses.activate
    async def test_follow_user(self):
        responses.add(
            responses.PUT, f"{BASE_URL}/users/me/following/ann", status=204
        )

        await self.client.follow_user("me", "ann")

        self.assertEqual(responses.calls[0].request.method, "PUT")

    @responses.activate
    async def test_follow_unknown_user_raises_not_found(self):
        responses.add(
            responses.PUT, f"{BASE_URL}/users/me/following/ghost", status=404
        )

        with self.assertRaises(NotFound):
            await self.client.follow_user("me", "ghost")

    @responses.activate
    async def test_get_tag(self):
        responses.add(
            responses.GET,
            f"{BASE_URL}/tags/tag-1",
            json={
                "id": "tag-1",
                "thingId": "t1",
                "thingTitle": "Dune",
                "taggerId": "ann",
                "taggerName": "Ann",
                "taggedUserId": "me",
                "state": "completed",
                "rating": 4,
                "status": "pending",
            },
        )

        tag = await self.client.get_tag("tag-1")

        self.assertEqual(tag.rating, 4)
        self.assertTrue(tag.is_pending)

    @responses.activate
    async def test_get_missing_tag_raises_not_found(self):
        responses.add(responses.GET, f"{BASE_URL}/tags/tag-1", status=404)

        with self.assertRaises(NotFound):
            await self.client.get_tag("tag-1")

    @responses.activate
    async def test_answers_send_user_and_report_conflicts(self):
        responses.add(
            responses.POST,
            f"{BASE_URL}/tags/tag-1/accept",
            status=204,
            match=[matchers.json_params_matcher({"userId": "me"})],
        )
        responses.add(responses.POST, f"{BASE_URL}/tags/tag-1/decline", status=409)

        self.assertTrue(await self.client.accept_tag("tag-1", "me"))
        self.assertFalse(await self.client.decline_tag("tag-1", "me"))
