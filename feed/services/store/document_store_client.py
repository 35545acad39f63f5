"""Notification store client for the document store HTTP gateway."""

from typing import Any

import structlog
from asgiref.sync import sync_to_async
from pydantic import ValidationError

from feed.config.downstream_urls import (
    DOCUMENT_STORE_BASE_URL,
    DOCUMENT_STORE_TIMEOUT_SECONDS,
)
from feed.constants import PAGE_SIZE
from feed.exceptions import NotFound, StoreError
from feed.schemas.notification import NotificationPage
from feed.schemas.tag import TagRecord
from feed.services.downstream import BaseDownstreamClient
from feed.services.store.base_store_client import NotificationStoreClient

logger = structlog.get_logger(__name__)

TAG_NOT_PENDING = 409


class DocumentStoreClient(BaseDownstreamClient, NotificationStoreClient):
    """Store client talking to the document store's REST gateway.

    Requests are blocking (``requests``) and run in a worker thread so they
    never block the event loop driving the feed session.
    """

    def __init__(
        self,
        base_url: str = DOCUMENT_STORE_BASE_URL,
        timeout: int = DOCUMENT_STORE_TIMEOUT_SECONDS,
    ):
        super().__init__(
            service_name="document-store", base_url=base_url, timeout=timeout
        )

    async def _request(self, *args: Any, **kwargs: Any):
        return await sync_to_async(self._make_request, thread_sensitive=False)(
            *args, **kwargs
        )

    async def fetch_notifications(
        self,
        user_id: str,
        cursor: str | None = None,
        limit: int = PAGE_SIZE,
    ) -> NotificationPage:
        params: dict[str, Any] = {"limit": limit}
        if cursor:
            params["cursor"] = cursor

        response = await self._request(
            "GET",
            f"/users/{user_id}/notifications",
            operation="fetch_notifications",
            params=params,
        )
        if response.status_code == 404:
            logger.info("No notifications for unknown user", user_id=user_id)
            return NotificationPage()

        body = self._json(response, "fetch_notifications")
        documents = body.get("notifications") or []
        items = self.parse_records(doc for doc in documents if isinstance(doc, dict))
        return NotificationPage(items=items, next_cursor=body.get("nextCursor"))

    async def mark_one_read(self, notification_id: str) -> None:
        response = await self._request(
            "POST",
            f"/notifications/{notification_id}/read",
            operation="mark_one_read",
        )
        if response.status_code == 404:
            logger.warning(
                "Mark read matched no notification", notification_id=notification_id
            )

    async def mark_all_read(self, user_id: str) -> None:
        await self._request(
            "POST",
            f"/users/{user_id}/notifications/read-all",
            operation="mark_all_read",
            passthrough_statuses=(),
        )

    async def follow_user(self, actor_id: str, target_id: str) -> None:
        response = await self._request(
            "PUT",
            f"/users/{actor_id}/following/{target_id}",
            operation="follow_user",
        )
        if response.status_code == 404:
            raise NotFound(resource="user", resource_id=target_id)

    async def get_tag(self, tag_id: str) -> TagRecord:
        response = await self._request("GET", f"/tags/{tag_id}", operation="get_tag")
        if response.status_code == 404:
            logger.warning("Tag not found", tag_id=tag_id)
            raise NotFound(resource="tag", resource_id=tag_id)

        try:
            return TagRecord.model_validate(self._json(response, "get_tag"))
        except ValidationError as e:
            logger.error(
                "Failed to validate tag response",
                tag_id=tag_id,
                validation_errors=e.errors(),
            )
            raise StoreError(
                message=f"Invalid tag document for {tag_id}", operation="get_tag"
            ) from e

    async def accept_tag(self, tag_id: str, user_id: str) -> bool:
        return await self._answer_tag(tag_id, user_id, "accept")

    async def decline_tag(self, tag_id: str, user_id: str) -> bool:
        return await self._answer_tag(tag_id, user_id, "decline")

    async def _answer_tag(self, tag_id: str, user_id: str, answer: str) -> bool:
        response = await self._request(
            "POST",
            f"/tags/{tag_id}/{answer}",
            operation=f"{answer}_tag",
            json_data={"userId": user_id},
            passthrough_statuses=(404, TAG_NOT_PENDING),
        )
        answered = response.status_code < 400
        logger.info(
            "Tag answered",
            tag_id=tag_id,
            answer=answer,
            status_code=response.status_code,
            answered=answered,
        )
        return answered

    def _json(self, response, operation: str) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "Failed to parse document store response",
                operation=operation,
                error=str(e),
            )
            raise StoreError(
                message=f"{self.service_name} returned invalid JSON",
                operation=operation,
                status_code=response.status_code,
            ) from e
        if not isinstance(body, dict):
            raise StoreError(
                message=f"{self.service_name} returned an unexpected body",
                operation=operation,
                status_code=response.status_code,
            )
        return body
