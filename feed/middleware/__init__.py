"""Middleware components for the activity feed service."""

from feed.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
