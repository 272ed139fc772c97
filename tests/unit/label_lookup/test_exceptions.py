"""Tests for custom exception classes."""

from label_lookup.exceptions import (
    APIErrorException,
    ErrorCode,
    LabelLookupException,
    LabelNotFoundException,
    LookupServiceException,
    SearchBackendException,
)
from label_lookup.models.label import ApiError


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        assert ErrorCode.INVALID_INPUT == "INVALID_INPUT"
        assert ErrorCode.INTERNAL_FAILURE == "INTERNAL_FAILURE"
        assert ErrorCode.LABEL_NOT_FOUND == "LABEL_NOT_FOUND"


class TestLabelLookupException:
    def test_basic(self):
        exc = LabelLookupException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.LOOKUP_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        exc = LabelLookupException(
            message="Test error", code=ErrorCode.LOOKUP_SERVICE_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.LOOKUP_SERVICE_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestAPIErrorException:
    def test_from_invalid_input(self):
        exc = APIErrorException.from_api_error(ApiError.invalid_input())

        assert exc.message == "You must specify the name parameter."
        assert exc.http_status_code == 400
        assert exc.code == ErrorCode.INVALID_INPUT
        assert exc.details == {}

    def test_from_internal_failure(self):
        exc = APIErrorException.from_api_error(ApiError.internal_failure())

        assert str(exc) == "Errors occured."
        assert exc.status_code == 500
        assert exc.code == ErrorCode.INTERNAL_FAILURE


class TestServiceExceptions:
    def test_lookup_service_defaults(self):
        exc = LookupServiceException("Kaboom!")

        assert exc.code == ErrorCode.LOOKUP_SERVICE_ERROR
        assert exc.status_code == 500
        assert isinstance(exc, LabelLookupException)

    def test_search_backend(self):
        exc = SearchBackendException("Search failed", details={"index": "labels"})

        assert exc.code == ErrorCode.SEARCH_BACKEND_ERROR
        assert exc.status_code == 502
        assert isinstance(exc, LookupServiceException)

    def test_label_not_found(self):
        exc = LabelNotFoundException("basic-science")

        assert exc.code == ErrorCode.LABEL_NOT_FOUND
        assert exc.status_code == 404
        assert "basic-science" in exc.message
        assert exc.details == {"label_name": "basic-science"}
        assert isinstance(exc, LookupServiceException)
