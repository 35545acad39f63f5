"""Liveness response schema."""

from pydantic import Field

from feed.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(default="alive", description="Liveness status")
    service: str = Field(default="activity-service", description="Service name")
