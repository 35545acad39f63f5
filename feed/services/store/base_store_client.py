"""Contract for notification store clients."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from feed.constants import PAGE_SIZE
from feed.exceptions import MalformedRecord
from feed.schemas.notification import NotificationPage, NotificationRecord
from feed.schemas.tag import TagRecord

logger = structlog.get_logger(__name__)


class NotificationStoreClient(ABC):
    """Async access to notification, follow and tag documents.

    Every method raises StoreUnavailable on transport or database failure.
    Stores never raise MalformedRecord to callers: unparseable documents are
    logged and left out of the page.
    """

    @abstractmethod
    async def fetch_notifications(
        self,
        user_id: str,
        cursor: str | None = None,
        limit: int = PAGE_SIZE,
    ) -> NotificationPage:
        """Fetch one page of a user's notifications, newest first.

        Args:
            user_id: Recipient of the notifications.
            cursor: ``next_cursor`` of the previous page, None for the first.
            limit: Maximum number of records in the page.
        """

    @abstractmethod
    async def mark_one_read(self, notification_id: str) -> None:
        """Mark one notification read. Idempotent."""

    @abstractmethod
    async def mark_all_read(self, user_id: str) -> None:
        """Mark every notification of a user read in one write."""

    @abstractmethod
    async def follow_user(self, actor_id: str, target_id: str) -> None:
        """Make ``actor_id`` follow ``target_id``. Idempotent."""

    @abstractmethod
    async def get_tag(self, tag_id: str) -> TagRecord:
        """Load a tag.

        Raises:
            NotFound: If the tag does not exist.
        """

    @abstractmethod
    async def accept_tag(self, tag_id: str, user_id: str) -> bool:
        """Accept a pending tag addressed to ``user_id``; False if not pending."""

    @abstractmethod
    async def decline_tag(self, tag_id: str, user_id: str) -> bool:
        """Decline a pending tag addressed to ``user_id``; False if not pending."""

    def parse_record(self, document: Mapping[str, Any]) -> NotificationRecord:
        """Validate a raw notification document.

        Raises:
            MalformedRecord: If required fields are missing or invalid.
        """
        try:
            return NotificationRecord.model_validate(document)
        except ValidationError as e:
            raise MalformedRecord(
                record_id=str(document.get("id") or "") or None,
                reason="; ".join(
                    f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ),
            ) from e

    def parse_records(
        self, documents: Iterable[Mapping[str, Any]]
    ) -> list[NotificationRecord]:
        """Validate documents, dropping and logging the malformed ones."""
        records = []
        for document in documents:
            try:
                records.append(self.parse_record(document))
            except MalformedRecord as e:
                logger.warning(
                    "Dropping malformed notification record",
                    record_id=e.record_id,
                    reason=e.reason,
                )
        return records
