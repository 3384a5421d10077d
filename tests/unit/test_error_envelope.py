"""
Unit tests for exceptions and the JSON error body
"""
import json

import pytest

from moodlift.core.error_handlers import ErrorHandler
from moodlift.core.exceptions import (
    AuthenticationRequiredError,
    ErrorCode,
    NotFoundError,
    RemoteStoreError,
    RemoteTimeoutError,
    RequestValidationFailed,
    StoreConfigurationError,
    describe_error,
)


def test_exception_status_codes():
    assert StoreConfigurationError(["DATABASE_URL"]).status_code == 500
    assert RemoteStoreError("boom").status_code == 500
    assert RemoteTimeoutError("Admin lookup", 4).status_code == 504
    assert RequestValidationFailed("bad").status_code == 400
    assert NotFoundError("Book", "b1").status_code == 404
    assert AuthenticationRequiredError().status_code == 401


def test_configuration_error_lists_missing_settings():
    exc = StoreConfigurationError(["SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"])

    assert exc.message == "Missing backend configuration: SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY"
    assert exc.error_code == ErrorCode.CONFIGURATION_ERROR
    assert exc.details == {"missing": ["SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"]}


def test_timeout_message():
    exc = RemoteTimeoutError("Admin lookup", 4.0)
    assert exc.message == "Admin lookup timed out after 4 seconds"
    assert exc.details["operation"] == "Admin lookup"


@pytest.mark.parametrize("err,expected", [
    (None, "Unknown error"),
    (RemoteStoreError("row level security"), "row level security"),
    (ValueError("bad value"), "bad value"),
    (KeyError(), "KeyError"),
    ("plain text", "plain text"),
    ({"message": "Bucket not found"}, "Bucket not found"),
    ({"error": "Duplicate"}, "Duplicate"),
    ({"code": 7}, "{'code': 7}"),
])
def test_describe_error(err, expected):
    assert describe_error(err) == expected


def test_error_response_shape():
    """Test every error body carries error, error_code, details, request_id and timestamp"""
    handler = ErrorHandler()

    response = handler._create_error_response(
        error_code=ErrorCode.NOT_FOUND.value,
        message="Book 'b1' not found",
        request_id="req-1",
        status_code=404,
        details={"id": "b1"},
    )

    body = json.loads(response.body)
    assert response.status_code == 404
    assert body["error"] == "Book 'b1' not found"
    assert body["error_code"] == "NOT_FOUND"
    assert body["details"] == {"id": "b1"}
    assert body["request_id"] == "req-1"
    assert body["timestamp"]


def test_error_statistics():
    handler = ErrorHandler()
    handler._track_error("REMOTE_CALL_FAILED")
    handler._track_error("REMOTE_CALL_FAILED")
    handler._track_error("NOT_FOUND")

    stats = handler.get_error_statistics()

    assert stats["error_counts"] == {"REMOTE_CALL_FAILED": 2, "NOT_FOUND": 1}
    assert stats["recent_errors"] == {"REMOTE_CALL_FAILED": 2, "NOT_FOUND": 1}
    assert stats["total_errors"] == 3
