"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from feed.constants import REQUEST_ID_HEADER
from feed.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Bind a request ID to the logging context for the life of a request.

    Reuses an incoming X-Request-ID header or generates a UUID, exposes it as
    ``request.request_id`` and echoes it on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()
