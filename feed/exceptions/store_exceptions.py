"""Exceptions raised by notification store clients."""


class StoreError(Exception):
    """Base exception for notification store errors."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize store error.

        Args:
            message: Error message
            operation: Store operation that failed (fetch, mark_read, ...)
            status_code: HTTP status code if the store answered over HTTP
        """
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)


class StoreUnavailable(StoreError):
    """The store could not be reached or failed transiently."""

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize store unavailable error.

        Args:
            operation: Store operation that failed
            message: Optional custom error message
            status_code: HTTP status code (500, 503, ...) if applicable
        """
        super().__init__(
            message=message or f"Notification store unavailable during {operation}",
            operation=operation,
            status_code=status_code,
        )


class NotFound(StoreError):
    """A referenced tag or subject does not exist in the store."""

    def __init__(self, resource: str, resource_id: str):
        """Initialize not found error.

        Args:
            resource: Kind of resource that was looked up (tag, thing, ...)
            resource_id: ID of the resource that was not found
        """
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource.capitalize()} with ID {resource_id} not found",
            operation=f"get_{resource}",
            status_code=404,
        )


class MalformedRecord(StoreError):
    """A stored notification document is missing or has invalid fields.

    Raised only while parsing documents; stores catch it, log it and drop
    the record.
    """

    def __init__(self, record_id: str | None, reason: str):
        """Initialize malformed record error.

        Args:
            record_id: ID of the document if it could be read
            reason: What was wrong with the document
        """
        self.record_id = record_id
        self.reason = reason
        super().__init__(
            message=f"Malformed notification record {record_id or '<no id>'}: {reason}",
            operation="parse_notification",
        )
