"""
┌──────────────────────────────────────────────────────────────┐
│                  Registry Error Handling Flow                │
│                                                              │
│  [Fetch] → [Validate] → [Classify] → [Absorb | Raise]        │
│                                                              │
│  Not Found / Validation Failure → logged, absence returned   │
│  Generation Failure            → None artifact               │
│  Invalid Request               → raised to the caller (400)  │
└──────────────────────────────────────────────────────────────┘

Exception classes for the AxionJS registry service
Flow: Error occurrence → Classification → Logging → Absence value or HTTP response
"""

from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


class AxionsRegistryException(Exception):
    """
    Base exception class for the registry service.

    Exception Handling Flow:
    1. error_occurred() → Capture error details and context
    2. log_error() → Record error with structured logging
    3. format_response() → API layer turns status_code into an HTTP response

    Only InvalidRequestError is meant to leave the service layer. Fetch
    errors are raised and caught inside the gateway.
    """

    log_level = "error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        """Initialize base exception."""
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code

        getattr(logger, self.log_level)(
            "Registry exception occurred",
            error_type=self.__class__.__name__,
            message=message,
            error_code=error_code,
            status_code=status_code,
            details=details
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for an API error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidRequestError(AxionsRegistryException):
    """
    Malformed request: missing or invalid required fields.

    The only error class surfaced to callers, since it describes the
    request rather than the state of the registry.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "INVALID_REQUEST"
    ):
        """Initialize invalid request error."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["invalid_value"] = str(value)

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=400
        )
        self.field = field
        self.value = value


class NotFoundError(AxionsRegistryException):
    """Registry item lookup failed. Raised by the API layer only."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        error_code: str = "NOT_FOUND"
    ):
        """Initialize not found error."""
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=404
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RegistryFetchError(AxionsRegistryException):
    """
    Transport or payload validation failure against the remote registry.

    Fetch Error Flow:
    1. Endpoint returns non-success or a payload of the wrong shape
    2. Capture endpoint details
    3. Gateway catches it and moves to the next endpoint strategy
    4. Absence is returned when every strategy failed
    """

    # Legacy endpoints routinely 404; the gateway logs the final outcome
    log_level = "debug"

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status: Optional[int] = None,
        error_code: str = "REGISTRY_FETCH_ERROR"
    ):
        """Initialize registry fetch error."""
        details: Dict[str, Any] = {}
        if url:
            details["url"] = url
        if status is not None:
            details["upstream_status"] = status

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=502
        )
        self.url = url
        self.status = status
