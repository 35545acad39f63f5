"""Services for the feed app."""

from feed.services.feed_session_controller import (
    FeedSessionController,
    FeedSessionDelegate,
    InteractionEvent,
)
from feed.services.grouping_engine import flatten_members, group_key, group_notifications
from feed.services.message_formatter import format_group_message, render_group
from feed.services.read_state_coordinator import ReadStateCoordinator
from feed.services.tag_acceptance import TagAcceptanceFlow

__all__ = [
    "FeedSessionController",
    "FeedSessionDelegate",
    "InteractionEvent",
    "ReadStateCoordinator",
    "TagAcceptanceFlow",
    "flatten_members",
    "format_group_message",
    "group_key",
    "group_notifications",
    "render_group",
]
