"""Health check schemas."""

from feed.schemas.health.liveness_response import LivenessResponse

__all__ = ["LivenessResponse"]
