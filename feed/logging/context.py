"""Request-scoped logging context.

A ContextVar is used rather than thread-local storage so the request ID follows
coroutines scheduled by the feed engine and calls bridged through asgiref.
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> None:
    """Bind the request ID to the current execution context."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the request ID bound to the current context, if any."""
    return _request_id.get()


def clear_request_id() -> None:
    """Unbind the request ID once the request has been processed."""
    _request_id.set(None)
