"""Optimistic read/unread state for a user's notifications.

The coordinator owns the in-memory projection of the records on screen. Read
flips are applied to the projection first and persisted afterwards ("flip
now, persist async"):

- single records and groups stay flipped when the store write fails; the
  failed IDs are retried after the next successful reload;
- mark-all-read is only applied once the store confirms it, so a failure
  leaves every record as it was.

IDs flipped locally stay *pending* until a fetched copy of the record comes
back already read, or until a reload shows the record has scrolled off the
first page (older than everything fetched) and its write has settled. Reloads
re-apply pending flips, so a refresh that raced a mark-read can't bring an
unread badge back. A confirmed mark-all-read is kept as a single cutoff time:
any fetched record created at or before it is shown as read.

Each transition builds a new projection and swaps it in with one assignment,
so readers never observe a half-updated group.
"""

import asyncio
from collections.abc import Iterable
from datetime import datetime

import structlog

from feed.exceptions import StoreError
from feed.schemas.notification import NotificationGroup, NotificationRecord
from feed.services.store import NotificationStoreClient

logger = structlog.get_logger(__name__)


class ReadStateCoordinator:
    """Tracks read state of one user's records and persists read flips."""

    def __init__(self, store: NotificationStoreClient, user_id: str):
        self.store = store
        self.user_id = user_id
        self._records: dict[str, NotificationRecord] = {}
        self._pending_reads: frozenset[str] = frozenset()
        self._failed_reads: frozenset[str] = frozenset()
        self._writing: frozenset[str] = frozenset()
        self._read_through: datetime | None = None

    @property
    def records(self) -> list[NotificationRecord]:
        """Current projection, in the order records were loaded."""
        return list(self._records.values())

    @property
    def pending_reads(self) -> frozenset[str]:
        return self._pending_reads

    @property
    def failed_reads(self) -> frozenset[str]:
        return self._failed_reads

    @property
    def read_through(self) -> datetime | None:
        """Creation time up to which a mark-all-read was confirmed."""
        return self._read_through

    def get(self, notification_id: str) -> NotificationRecord | None:
        return self._records.get(notification_id)

    def __contains__(self, notification_id: object) -> bool:
        return notification_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def unread_total(self) -> int:
        """Number of unread records, counted from the current projection."""
        return sum(1 for record in self._records.values() if not record.read)

    def replace(self, records: Iterable[NotificationRecord]) -> None:
        """Swap the projection for freshly fetched records."""
        fetched = list(records)
        self._drop_settled_pending(fetched)
        self._records = self._reconcile(fetched, existing={})

    def append(self, records: Iterable[NotificationRecord]) -> list[NotificationRecord]:
        """Add records not already in the projection.

        Returns:
            The records that were added, after reconciliation.
        """
        fresh = self._reconcile(records, existing=self._records)
        self._records = {**self._records, **fresh}
        return list(fresh.values())

    async def mark_read(self, notification_id: str) -> bool:
        """Flip one record to read and persist it.

        Returns:
            False if the store write failed (the flip is kept), True otherwise.
        """
        record = self._records.get(notification_id)
        if record is None or record.read:
            return True

        self._flip([notification_id])
        return await self._persist_reads([notification_id])

    async def mark_group_read(self, group: NotificationGroup) -> bool:
        """Flip every unread member of a group and persist each one.

        Returns:
            False if any member write failed (flips are kept), True otherwise.
        """
        unread_ids = [
            member.id for member in group.members if not self._is_read(member)
        ]
        if not unread_ids:
            return True

        self._flip(unread_ids)
        logger.info(
            "Group marked read",
            group_key=group.group_key,
            count=len(unread_ids),
        )
        return await self._persist_reads(unread_ids)

    async def mark_all_read(self) -> bool:
        """Mark all records read once the store confirms the bulk write.

        Only records created at or before the newest one on screen when the
        request was made are flipped.

        Returns:
            True on success; False if the write failed and nothing changed.
        """
        cutoff = max(
            (record.created_at for record in self._records.values()), default=None
        )
        try:
            await self.store.mark_all_read(self.user_id)
        except StoreError as e:
            logger.warning(
                "Mark all read failed, keeping current state",
                user_id=self.user_id,
                error=str(e),
            )
            return False

        if cutoff is not None and (
            self._read_through is None or cutoff > self._read_through
        ):
            self._read_through = cutoff

        confirmed = {
            record_id
            for record_id, record in self._records.items()
            if self._is_read_through(record)
        }
        self._records = {
            record_id: record.as_read() if record_id in confirmed else record
            for record_id, record in self._records.items()
        }
        self._pending_reads = self._pending_reads - confirmed
        self._failed_reads = self._failed_reads - confirmed
        logger.info(
            "All notifications marked read",
            user_id=self.user_id,
            read_through=self._read_through,
        )
        return True

    async def retry_failed(self) -> bool:
        """Re-issue writes that failed earlier for records still on screen."""
        retry_ids = [
            record_id for record_id in self._failed_reads if record_id in self._records
        ]
        if not retry_ids:
            return True
        logger.info("Retrying failed read writes", count=len(retry_ids))
        return await self._persist_reads(retry_ids)

    def _is_read(self, record: NotificationRecord) -> bool:
        current = self._records.get(record.id, record)
        return current.read or record.id in self._pending_reads

    def _is_read_through(self, record: NotificationRecord) -> bool:
        return self._read_through is not None and record.created_at <= self._read_through

    def _drop_settled_pending(self, fetched: list[NotificationRecord]) -> None:
        """Forget pending flips for records that fell off the fetched page.

        Kept: IDs on the page, IDs whose write failed or is still in flight,
        and IDs newer than the oldest fetched record.
        """
        fetched_ids = {record.id for record in fetched}
        oldest = min((record.created_at for record in fetched), default=None)
        keep = fetched_ids | self._failed_reads | self._writing

        settled = set()
        for record_id in self._pending_reads - keep:
            record = self._records.get(record_id)
            if record is None or oldest is None or record.created_at < oldest:
                settled.add(record_id)
        if settled:
            logger.debug("Dropping settled pending reads", count=len(settled))
            self._pending_reads = self._pending_reads - settled

    def _flip(self, notification_ids: Iterable[str]) -> None:
        ids = set(notification_ids)
        self._records = {
            record_id: record.as_read() if record_id in ids else record
            for record_id, record in self._records.items()
        }
        self._pending_reads = self._pending_reads | ids

    def _reconcile(
        self,
        records: Iterable[NotificationRecord],
        existing: dict[str, NotificationRecord],
    ) -> dict[str, NotificationRecord]:
        pending = set(self._pending_reads)
        projected: dict[str, NotificationRecord] = {}

        for record in records:
            if record.id in existing or record.id in projected:
                continue
            if record.read:
                # The store has caught up with the local flip
                pending.discard(record.id)
            elif record.id in pending or self._is_read_through(record):
                record = record.as_read()
            projected[record.id] = record

        self._pending_reads = frozenset(pending)
        self._failed_reads = self._failed_reads & self._pending_reads
        return projected

    async def _persist_reads(self, notification_ids: list[str]) -> bool:
        ids = set(notification_ids)
        self._writing = self._writing | ids
        try:
            results = await asyncio.gather(
                *(self.store.mark_one_read(record_id) for record_id in notification_ids),
                return_exceptions=True,
            )
        finally:
            self._writing = self._writing - ids

        failed = set()
        for record_id, result in zip(notification_ids, results, strict=True):
            if isinstance(result, StoreError):
                logger.warning(
                    "Mark read write failed, keeping local flip",
                    notification_id=record_id,
                    error=str(result),
                )
                failed.add(record_id)
            elif isinstance(result, BaseException):
                raise result

        succeeded = set(notification_ids) - failed
        self._failed_reads = (self._failed_reads - succeeded) | failed
        return not failed
