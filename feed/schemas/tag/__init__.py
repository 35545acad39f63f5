"""Tag schemas."""

from feed.schemas.tag.tag_record import TagRecord

__all__ = ["TagRecord"]
