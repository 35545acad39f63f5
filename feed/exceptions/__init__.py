"""Exception types and handlers for the feed app."""

from feed.exceptions.handlers import custom_exception_handler
from feed.exceptions.store_exceptions import (
    MalformedRecord,
    NotFound,
    StoreError,
    StoreUnavailable,
)

__all__ = [
    "MalformedRecord",
    "NotFound",
    "StoreError",
    "StoreUnavailable",
    "custom_exception_handler",
]
