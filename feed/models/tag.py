"""Tag model."""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from feed.enums import TagState, TagStatus


class Tag(models.Model):
    """A pending invitation asking a user to add a thing to their list."""

    tag_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tagger = models.ForeignKey(
        "feed.User",
        on_delete=models.CASCADE,
        related_name="tags_sent",
        db_column="tagger_id",
    )
    tagged_user = models.ForeignKey(
        "feed.User",
        on_delete=models.CASCADE,
        related_name="tags_received",
        db_column="tagged_user_id",
    )
    thing_id = models.CharField(max_length=128)
    thing_title = models.CharField(max_length=255, default="", blank=True)
    state = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in TagState],
        default=TagState.TODO.value,
    )
    rating = models.PositiveSmallIntegerField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in TagStatus],
        default=TagStatus.PENDING.value,
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """Django model metadata."""

        db_table = "tags"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of tag."""
        return f"Tag {self.tag_id} on {self.thing_title or self.thing_id}"
