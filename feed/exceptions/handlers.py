"""Global exception handler for the activity feed REST layer."""

import logging
from datetime import UTC, datetime
from typing import Any

from django.http import Http404

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from feed.constants import REQUEST_ID_HEADER
from feed.exceptions.store_exceptions import NotFound, StoreError, StoreUnavailable
from feed.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Translates store errors into HTTP responses with the standard body
    ``{status, message, request_id, timestamp}``:

    - NotFound -> 404
    - StoreUnavailable -> 503
    - other StoreError -> 502
    - anything DRF does not handle -> 500

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = getattr(view, "request", None)
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, NotFound):
            status_code = status.HTTP_404_NOT_FOUND
            message = str(exc)
        elif isinstance(exc, Http404):
            status_code = status.HTTP_404_NOT_FOUND
            message = "The requested resource was not found."
        elif isinstance(exc, StoreUnavailable):
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            message = "The notification store is temporarily unavailable."
        elif isinstance(exc, StoreError):
            status_code = status.HTTP_502_BAD_GATEWAY
            message = "The notification store returned an unexpected error."
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            message = "An internal server error occurred."

        response = Response(
            _create_error_response(status_code, message, request_id),
            status=status_code,
        )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)
    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body."""
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log the exception, client errors as warnings and the rest as errors."""
    log_level = logging.WARNING if response.status_code < 500 else logging.ERROR
    logger.log(
        log_level,
        "Exception occurred: %s: %s | Path: %s %s | Status: %s",
        type(exc).__name__,
        exc,
        getattr(request, "method", "unknown"),
        getattr(request, "path", "unknown"),
        response.status_code,
        exc_info=log_level == logging.ERROR,
    )
