"""UserFollow model."""

from typing import ClassVar

from django.db import models


class UserFollow(models.Model):
    """Follower relationship between two users.

    Written by the follow-back action on a ``followed`` feed row.
    """

    follower = models.ForeignKey(
        "feed.User",
        on_delete=models.CASCADE,
        related_name="following",
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        "feed.User",
        on_delete=models.CASCADE,
        related_name="followers",
        db_column="followee_id",
    )
    followed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_follows"
        managed = False
        unique_together: ClassVar[list[list[str]]] = [["follower", "followee"]]
        ordering: ClassVar[list[str]] = ["-followed_at"]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower_id} follows {self.followee_id}"
