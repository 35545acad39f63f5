"""Notification model for per-event activity records."""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from feed.enums import NotificationType


class Notification(models.Model):
    """One activity event delivered to a user.

    Records are append-only: apart from ``read`` nothing changes after the
    actor-side event created them. ``data`` is the loosely typed payload
    (thingId, postId, tagId, fromUserId, fromUserName, thingTitle) that the
    schema layer narrows into a per-type variant.

    Attributes:
        notification_id: Unique identifier for the notification.
        user: The user receiving this notification.
        notification_type: One of NotificationType.
        title: Precomputed display title.
        message: Precomputed display message for a single event.
        read: Whether the user has read this notification.
        data: JSON payload with cross references to things, posts and tags.
        created_at: When the event happened.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    user = models.ForeignKey(
        "feed.User",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="user_id",
        help_text="User receiving the notification",
    )
    notification_type = models.CharField(
        max_length=20,
        choices=[(t.value, t.value) for t in NotificationType],
        db_column="type",
        help_text="Kind of activity the notification reports",
    )
    title = models.CharField(max_length=255, default="", blank=True)
    message = models.TextField(default="", blank=True)
    read = models.BooleanField(
        default=False,
        help_text="Whether the notification has been read by the user",
    )
    data = models.JSONField(
        default=dict,
        blank=True,
        help_text="Cross references to the subject thing, post, tag and actor",
    )
    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="When the notification was created",
    )

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at", "-notification_id"]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "-created_at"]),
            models.Index(fields=["user", "read"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"user={self.user_id}, "
            f"read={self.read})>"
        )
