"""Schema for a tag invitation."""

from pydantic import Field

from feed.enums import TagState, TagStatus
from feed.schemas.base_schema_model import BaseSchemaModel


class TagRecord(BaseSchemaModel):
    """A tag as shown in the tag acceptance flow."""

    id: str = Field(..., description="Tag identifier")
    thing_id: str = Field(..., description="Thing the user was tagged in")
    thing_title: str = Field(default="", description="Denormalized thing title")
    tagger_id: str = Field(..., description="User who sent the tag")
    tagger_name: str = Field(default="", description="Display name of the tagger")
    tagged_user_id: str = Field(..., description="User who was tagged")
    state: TagState = Field(default=TagState.TODO)
    rating: int | None = Field(default=None, ge=1, le=5)
    status: TagStatus = Field(default=TagStatus.PENDING)

    @property
    def is_pending(self) -> bool:
        return self.status == TagStatus.PENDING
