"""Accept/decline flow for a tag opened from the feed."""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from feed.exceptions import NotFound, StoreError
from feed.schemas.tag import TagRecord
from feed.services.store import NotificationStoreClient

logger = structlog.get_logger(__name__)


class TagAcceptanceFlow:
    """State of the dialog shown when a tagged notification is opened.

    The flow loads the tag, then lets the tagged user accept or decline it
    once. ``on_accepted`` runs after a successful accept; the feed passes its
    refresh here so the accepted item shows up.
    """

    def __init__(
        self,
        store: NotificationStoreClient,
        tag_id: str,
        user_id: str,
        on_accepted: Callable[[], Awaitable[Any]] | None = None,
    ):
        self.store = store
        self.tag_id = tag_id
        self.user_id = user_id
        self.on_accepted = on_accepted
        self.tag: TagRecord | None = None
        self.loading = False
        self.not_found = False
        self.load_failed = False
        self.submitting = False
        self.closed = False

    @property
    def can_answer(self) -> bool:
        return (
            self.tag is not None
            and self.tag.is_pending
            and not self.submitting
            and not self.closed
        )

    async def load(self) -> TagRecord | None:
        self.loading = True
        self.not_found = False
        self.load_failed = False
        try:
            self.tag = await self.store.get_tag(self.tag_id)
        except NotFound:
            logger.info("Tag no longer exists", tag_id=self.tag_id)
            self.not_found = True
        except StoreError as e:
            logger.warning("Failed to load tag", tag_id=self.tag_id, error=str(e))
            self.load_failed = True
        finally:
            self.loading = False
        return self.tag

    async def accept(self) -> bool:
        accepted = await self._answer(self.store.accept_tag, "accept")
        if accepted and self.on_accepted is not None:
            await self.on_accepted()
        return accepted

    async def decline(self) -> bool:
        return await self._answer(self.store.decline_tag, "decline")

    def dismiss(self) -> None:
        self.closed = True

    async def _answer(
        self, write: Callable[[str, str], Awaitable[bool]], answer: str
    ) -> bool:
        if not self.can_answer:
            return False

        self.submitting = True
        try:
            answered = await write(self.tag_id, self.user_id)
        except StoreError as e:
            logger.warning(
                "Tag answer failed", tag_id=self.tag_id, answer=answer, error=str(e)
            )
            return False
        finally:
            self.submitting = False

        if not answered:
            logger.info("Tag was no longer pending", tag_id=self.tag_id, answer=answer)
            return False

        logger.info("Tag answered", tag_id=self.tag_id, answer=answer)
        self.closed = True
        return True
