"""Custom exceptions for the Label Lookup API with HTTP status codes."""

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from label_lookup.models.label import ApiError


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    LOOKUP_ERROR = "LOOKUP_ERROR"

    # Errors surfaced to API consumers
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_FAILURE = "INTERNAL_FAILURE"

    # Query service errors
    LOOKUP_SERVICE_ERROR = "LOOKUP_SERVICE_ERROR"
    SEARCH_BACKEND_ERROR = "SEARCH_BACKEND_ERROR"
    LABEL_NOT_FOUND = "LABEL_NOT_FOUND"


class LabelLookupException(Exception):
    """Base exception for label lookup errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LOOKUP_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize label lookup exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class APIErrorException(LabelLookupException):
    """Error returned to API consumers.

    Raised at the transport edge from an ApiError result; never carries
    internal failure detail.
    """

    def __init__(self, message: str, status_code: int, code: ErrorCode = ErrorCode.INTERNAL_FAILURE):
        super().__init__(message, code=code, status_code=status_code)

    @property
    def http_status_code(self) -> int:
        return self.status_code

    @classmethod
    def from_api_error(cls, error: "ApiError") -> "APIErrorException":
        return cls(error.message, status_code=error.http_status_code, code=error.code)


class LookupServiceException(LabelLookupException):
    """Query service failed to resolve a label."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LOOKUP_SERVICE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class SearchBackendException(LookupServiceException):
    """Elasticsearch request failed with an error status."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SEARCH_BACKEND_ERROR,
            status_code=status_code,
            details=details,
        )


class LabelNotFoundException(LookupServiceException):
    """No label record matches the requested name."""

    def __init__(self, name: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"No label found for name '{name}'",
            code=ErrorCode.LABEL_NOT_FOUND,
            status_code=404,
            details={"label_name": name, **(details or {})},
        )
