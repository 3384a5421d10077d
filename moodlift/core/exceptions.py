"""
Custom exceptions for the MoodLift backend.

Three families matter to callers: configuration errors (credentials or URLs
missing), remote-call errors (the hosted store failed or timed out) and
validation errors (a request lacks required fields). Read paths turn the first
two into soft failures; write paths surface them.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Remote store errors
    REMOTE_CALL_FAILED = "REMOTE_CALL_FAILED"
    REMOTE_TIMEOUT = "REMOTE_TIMEOUT"

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Authentication errors
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    MISSING_ADMIN_KEY = "MISSING_ADMIN_KEY"
    INVALID_ADMIN_KEY = "INVALID_ADMIN_KEY"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class MoodLiftException(Exception):
    """Base exception for the MoodLift backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class StoreConfigurationError(MoodLiftException):
    """Raised when the hosted backend is not configured (missing URL or key)."""

    def __init__(self, missing: list[str]):
        super().__init__(
            message=f"Missing backend configuration: {', '.join(missing)}",
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details={"missing": missing},
            status_code=500
        )


class RemoteStoreError(MoodLiftException):
    """Raised when a query or storage call against the hosted backend fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.REMOTE_CALL_FAILED,
            details=details,
            status_code=500
        )


class RemoteTimeoutError(MoodLiftException):
    """Raised when a remote call does not answer within its time budget."""

    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            message=f"{operation} timed out after {timeout_seconds:g} seconds",
            error_code=ErrorCode.REMOTE_TIMEOUT,
            details={"operation": operation, "timeout_seconds": timeout_seconds},
            status_code=504
        )


class RequestValidationFailed(MoodLiftException):
    """Raised when a request is missing required fields."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=400
        )


class NotFoundError(MoodLiftException):
    """Raised when a requested row does not exist."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} '{identifier}' not found",
            error_code=ErrorCode.NOT_FOUND,
            details={"resource": resource, "id": str(identifier)},
            status_code=404
        )


class AuthenticationRequiredError(MoodLiftException):
    """Raised when an endpoint needs a signed-in user and none is present."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            error_code=ErrorCode.AUTHENTICATION_REQUIRED,
            status_code=401
        )


def describe_error(err: Any) -> str:
    """Best-effort human readable message for anything raised by a remote call."""
    if err is None:
        return "Unknown error"
    if isinstance(err, MoodLiftException):
        return err.message
    if isinstance(err, BaseException):
        return str(err) or type(err).__name__
    if isinstance(err, str):
        return err
    if isinstance(err, dict):
        for key in ("message", "error", "msg"):
            if isinstance(err.get(key), str):
                return err[key]
    return str(err)
