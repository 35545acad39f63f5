"""Base client for downstream service communication."""

from typing import Any

import requests
import structlog

from feed.exceptions import StoreError, StoreUnavailable

logger = structlog.get_logger(__name__)


class BaseDownstreamClient:
    """Base class for blocking HTTP clients of downstream services."""

    def __init__(self, service_name: str, base_url: str, timeout: int = 10):
        """Initialize base downstream client.

        Args:
            service_name: Name of the downstream service (for logging/errors)
            base_url: Base URL for the service
            timeout: Request timeout in seconds
        """
        self.service_name = service_name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _make_request(
        self,
        method: str,
        path: str,
        operation: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        passthrough_statuses: tuple[int, ...] = (404,),
    ) -> requests.Response:
        """Make an HTTP request and translate failures into store errors.

        Args:
            method: HTTP method (GET, POST, ...)
            path: Path below the base URL
            operation: Store operation name used in logs and errors
            params: Query parameters
            json_data: JSON body data
            passthrough_statuses: Error statuses returned to the caller
                instead of raised

        Returns:
            Response object

        Raises:
            StoreUnavailable: For 5xx responses, timeouts and connection errors
            StoreError: For other 4xx responses
        """
        url = f"{self.base_url}{path}"
        logger.info(
            "Making downstream service request",
            service=self.service_name,
            operation=operation,
            method=method,
            url=url,
        )

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._get_headers(),
                params=params,
                json=json_data,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.error(
                "Downstream service request timed out",
                service=self.service_name,
                operation=operation,
                url=url,
                timeout=self.timeout,
            )
            raise StoreUnavailable(
                operation=operation, message=f"{self.service_name} timed out"
            ) from e
        except requests.ConnectionError as e:
            logger.error(
                "Failed to connect to downstream service",
                service=self.service_name,
                operation=operation,
                url=url,
                error=str(e),
            )
            raise StoreUnavailable(operation=operation, message=str(e)) from e

        logger.info(
            "Received downstream service response",
            service=self.service_name,
            operation=operation,
            status_code=response.status_code,
        )

        if response.status_code in passthrough_statuses:
            return response

        if response.status_code >= 500:
            logger.error(
                "Downstream service returned server error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise StoreUnavailable(
                operation=operation,
                message=(
                    f"{self.service_name} is unavailable "
                    f"(status: {response.status_code})"
                ),
                status_code=response.status_code,
            )

        if response.status_code >= 400:
            logger.error(
                "Downstream service returned client error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise StoreError(
                message=(
                    f"{self.service_name} returned "
                    f"{response.status_code}: {response.text}"
                ),
                operation=operation,
                status_code=response.status_code,
            )

        return response
