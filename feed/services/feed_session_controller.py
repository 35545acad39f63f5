"""Per-screen state machine for the notification feed.

The controller drives one feed screen: the initial load, pull-to-refresh,
infinite scroll and the user's actions on groups. It owns the record list
through a ReadStateCoordinator and hands grouped, formatted rows back to the
screen. Outbound effects (haptics, navigation, the tag dialog) go through a
FeedSessionDelegate.

Store failures stop here. They are logged and leave the last-known-good list
on screen, flagged as ``stale`` or ``load_failed``.
"""

from datetime import datetime

import structlog

from feed.constants import (
    PAGE_SIZE,
    PULL_DISTANCE_MAX,
    PULL_REFRESH_THRESHOLD,
    SCROLL_LOOKAHEAD_MARGIN,
)
from feed.enums import FeedState, HapticPattern, NotificationType
from feed.exceptions import StoreError
from feed.schemas.notification import (
    FeedGroupRow,
    NotificationGroup,
    NotificationPage,
    NotificationRecord,
)
from feed.services.grouping_engine import group_notifications
from feed.services.message_formatter import render_group
from feed.services.read_state_coordinator import ReadStateCoordinator
from feed.services.store import NotificationStoreClient
from feed.services.tag_acceptance import TagAcceptanceFlow

logger = structlog.get_logger(__name__)


class InteractionEvent:
    """A tap delivered to a control inside a feed row."""

    def __init__(self):
        self.propagation_stopped = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class FeedSessionDelegate:
    """Receiver for the controller's outbound signals. Defaults do nothing."""

    def haptic(self, pattern: HapticPattern) -> None:
        pass

    def navigate_to(self, subject_id: str) -> None:
        pass

    def open_tag_flow(self, flow: TagAcceptanceFlow) -> None:
        pass


class FeedSessionController:
    """State of one notification feed screen.

    ``state`` goes IDLE -> LOADING -> READY. While READY, ``refreshing`` and
    ``loading_more`` are independent busy flags. Every load or refresh bumps
    ``generation``; any response that comes back for an older generation is
    dropped.
    """

    def __init__(
        self,
        store: NotificationStoreClient,
        user_id: str,
        delegate: FeedSessionDelegate | None = None,
        coordinator: ReadStateCoordinator | None = None,
        page_size: int = PAGE_SIZE,
    ):
        self.store = store
        self.user_id = user_id
        self.delegate = delegate or FeedSessionDelegate()
        self.coordinator = coordinator or ReadStateCoordinator(store, user_id)
        self.page_size = page_size

        self.state = FeedState.IDLE
        self.refreshing = False
        self.loading_more = False
        self.load_failed = False
        self.stale = False
        self.has_more = True
        self.cursor: str | None = None
        self.generation = 0

        self.is_pulling = False
        self.pull_distance = 0.0
        self._pull_start_y = 0.0

    @property
    def records(self) -> list[NotificationRecord]:
        return self.coordinator.records

    @property
    def release_ready(self) -> bool:
        return self.pull_distance > PULL_REFRESH_THRESHOLD

    @property
    def pull_hint(self) -> str:
        return "Release to refresh" if self.release_ready else "Pull to refresh"

    def get_groups(self) -> list[NotificationGroup]:
        return group_notifications(self.coordinator.records)

    def get_unread_total(self) -> int:
        return self.coordinator.unread_total()

    def get_rows(self, now: datetime | None = None) -> list[FeedGroupRow]:
        return [render_group(group, now) for group in self.get_groups()]

    async def load(self) -> bool:
        """Fetch the first page. Only runs once, from IDLE."""
        if self.state is not FeedState.IDLE:
            logger.debug("Ignoring load, session already started", state=self.state)
            return False

        self.state = FeedState.LOADING
        generation = self._next_generation()
        try:
            page = await self._fetch_first_page()
        except StoreError as e:
            if not self._is_current(generation, "load"):
                return False
            logger.warning("Initial feed load failed", user_id=self.user_id, error=str(e))
            self.coordinator.replace([])
            self.load_failed = True
            self.state = FeedState.READY
            return False

        if not self._is_current(generation, "load"):
            return False
        self._apply_first_page(page)
        self.state = FeedState.READY
        await self.coordinator.retry_failed()
        return True

    async def on_refresh_requested(self) -> bool:
        """Reload the first page and replace the list with it."""
        if self.state is not FeedState.READY:
            logger.debug("Ignoring refresh before first load", state=self.state)
            return False

        generation = self._next_generation()
        self.refreshing = True
        try:
            page = await self._fetch_first_page()
        except StoreError as e:
            if self._is_current(generation, "refresh"):
                logger.warning("Feed refresh failed", user_id=self.user_id, error=str(e))
                self.refreshing = False
                self.stale = True
            return False

        if not self._is_current(generation, "refresh"):
            return False
        self._apply_first_page(page)
        self.refreshing = False
        self.delegate.haptic(HapticPattern.MEDIUM)
        await self.coordinator.retry_failed()
        return True

    def begin_pull(self, y: float, scroll_top: float) -> bool:
        """Start a pull gesture; only possible at the top of a loaded feed."""
        if self.state is not FeedState.READY or scroll_top != 0:
            return False
        self.is_pulling = True
        self._pull_start_y = y
        self.pull_distance = 0.0
        return True

    def update_pull(self, y: float, scroll_top: float = 0) -> float:
        if not self.is_pulling or scroll_top != 0:
            return self.pull_distance

        was_ready = self.release_ready
        self.pull_distance = min(max(0.0, y - self._pull_start_y), PULL_DISTANCE_MAX)
        if self.release_ready and not was_ready:
            self.delegate.haptic(HapticPattern.LIGHT)
        return self.pull_distance

    async def end_pull(self) -> bool:
        """Finish the gesture, refreshing when released past the threshold."""
        if not self.is_pulling:
            return False
        self.is_pulling = False
        try:
            if self.release_ready:
                return await self.on_refresh_requested()
            return False
        finally:
            self.pull_distance = 0.0

    async def on_scroll(
        self, scroll_top: float, scroll_height: float, client_height: float
    ) -> bool:
        if scroll_height - scroll_top <= client_height + SCROLL_LOOKAHEAD_MARGIN:
            return await self.on_scrolled_near_bottom()
        return False

    async def on_scrolled_near_bottom(self) -> bool:
        """Append the next page, if there is one and nothing else is loading.

        Refused while a refresh is in flight. A page is only appended if the
        generation and the cursor it was requested with are both unchanged.
        """
        if self.state is not FeedState.READY or self.refreshing or self.loading_more:
            return False
        if not self.has_more:
            return False
        if self.cursor is None:
            self.has_more = False
            return False

        generation = self.generation
        cursor = self.cursor
        self.loading_more = True
        try:
            page = await self.store.fetch_notifications(
                self.user_id, cursor=cursor, limit=self.page_size
            )
        except StoreError as e:
            logger.warning("Loading more notifications failed", user_id=self.user_id, error=str(e))
            return False
        finally:
            self.loading_more = False

        if not self._is_current(generation, "load_more"):
            return False
        if self.cursor != cursor:
            logger.info(
                "Dropping page for a superseded cursor",
                requested=cursor,
                current=self.cursor,
            )
            return False

        added = self.coordinator.append(page.items)
        self.cursor = page.next_cursor
        if page.next_cursor is None:
            self.has_more = False
        logger.debug("Appended notification page", added=len(added), has_more=self.has_more)
        return True

    async def on_group_activated(
        self, group: NotificationGroup, event: InteractionEvent | None = None
    ) -> None:
        """Mark the group read, then open its tag or its subject.

        A tap whose propagation was stopped by a row control (follow-back,
        view) does nothing here.
        """
        if event is not None and event.propagation_stopped:
            logger.debug("Ignoring activation, handled by a row control", group_key=group.group_key)
            return

        if not await self.coordinator.mark_group_read(group):
            self.delegate.haptic(HapticPattern.HEAVY)

        most_recent = group.most_recent
        if most_recent.type is NotificationType.TAGGED and most_recent.tag_id:
            self.delegate.open_tag_flow(self.tag_flow(most_recent.tag_id))
            return

        subject_id = most_recent.post_id or most_recent.thing_id
        if subject_id:
            self.delegate.navigate_to(subject_id)

    async def on_follow_back(
        self, group: NotificationGroup, event: InteractionEvent
    ) -> bool:
        event.stop_propagation()
        self.delegate.haptic(HapticPattern.LIGHT)

        actor_id = group.most_recent.actor_id
        if not actor_id:
            logger.warning("Follow back without an actor", group_key=group.group_key)
            self.delegate.haptic(HapticPattern.HEAVY)
            return False

        try:
            await self.store.follow_user(self.user_id, actor_id)
        except StoreError as e:
            logger.warning(
                "Follow back failed", user_id=self.user_id, target_id=actor_id, error=str(e)
            )
            self.delegate.haptic(HapticPattern.HEAVY)
            return False

        logger.info("Followed back", user_id=self.user_id, target_id=actor_id)
        self.delegate.haptic(HapticPattern.MEDIUM)
        return True

    def on_view(self, group: NotificationGroup, event: InteractionEvent) -> bool:
        event.stop_propagation()
        self.delegate.haptic(HapticPattern.LIGHT)

        thing_id = group.most_recent.thing_id
        if not thing_id:
            return False
        self.delegate.navigate_to(thing_id)
        return True

    async def on_mark_all_read_requested(self) -> bool:
        if not await self.coordinator.mark_all_read():
            self.delegate.haptic(HapticPattern.HEAVY)
            return False
        return True

    def tag_flow(self, tag_id: str) -> TagAcceptanceFlow:
        return TagAcceptanceFlow(
            self.store,
            tag_id,
            self.user_id,
            on_accepted=self.on_refresh_requested,
        )

    async def _fetch_first_page(self) -> NotificationPage:
        return await self.store.fetch_notifications(self.user_id, limit=self.page_size)

    def _apply_first_page(self, page: NotificationPage) -> None:
        self.coordinator.replace(page.items)
        self.cursor = page.next_cursor
        self.has_more = True
        self.load_failed = False
        self.stale = False

    def _next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def _is_current(self, generation: int, operation: str) -> bool:
        if generation == self.generation:
            return True
        logger.info(
            "Dropping superseded response",
            operation=operation,
            generation=generation,
            current=self.generation,
        )
        return False
