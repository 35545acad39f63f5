"""HTTP clients for downstream services."""

from feed.services.downstream.base_downstream_client import BaseDownstreamClient

__all__ = ["BaseDownstreamClient"]
