"""
Error handlers for the FastAPI application.

Every uncaught error is rendered as
`{"error", "error_code", "details", "request_id", "timestamp"}` so clients can
always read `error`.
"""

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
import asyncio
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from moodlift.core.exceptions import MoodLiftException, ErrorCode

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Renders exceptions as JSON error bodies and counts them per error code.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_moodlift_exception(
        self,
        request: Request,
        exc: MoodLiftException
    ) -> JSONResponse:
        """
        Handle application exceptions raised out of a route.

        Args:
            request: FastAPI request object
            exc: MoodLiftException instance

        Returns:
            JSONResponse with the exception's status code
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            f"{type(exc).__name__} in request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'error_code': exc.error_code.value,
                'status_code': exc.status_code,
                'details': exc.details,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error(exc.error_code.value)

        return self._create_error_response(
            error_code=exc.error_code.value,
            message=exc.message,
            details=exc.details,
            request_id=request_id,
            status_code=exc.status_code
        )

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Handle malformed request bodies and parameters as 400s with field details.
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        validation_errors = []
        for error in exc.errors():
            validation_errors.append({
                'field': '.'.join(str(loc) for loc in error['loc']),
                'message': error['msg'],
                'type': error['type'],
            })

        logger.warning(
            f"Validation error in request {request_id}: {len(validation_errors)} field errors",
            extra={
                'request_id': request_id,
                'validation_errors': validation_errors,
                'request_path': request.url.path
            }
        )

        first = validation_errors[0] if validation_errors else None
        message = f"Invalid {first['field']}: {first['message']}" if first else "Request validation failed"
        return self._create_error_response(
            error_code=ErrorCode.VALIDATION_ERROR.value,
            message=message,
            details={'validation_errors': validation_errors},
            request_id=request_id,
            status_code=400
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: HTTPException
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        error_code_map = {
            400: ErrorCode.VALIDATION_ERROR,
            401: ErrorCode.AUTHENTICATION_REQUIRED,
            403: ErrorCode.INVALID_ADMIN_KEY,
            404: ErrorCode.NOT_FOUND,
            504: ErrorCode.REMOTE_TIMEOUT,
        }
        error_code = error_code_map.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={
                'request_id': request_id,
                'status_code': exc.status_code,
                'request_path': request.url.path
            }
        )

        return self._create_error_response(
            error_code=error_code.value,
            message=str(exc.detail),
            request_id=request_id,
            status_code=exc.status_code
        )

    async def handle_timeout_error(
        self,
        request: Request,
        exc: asyncio.TimeoutError
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Request timeout in request {request_id}",
            extra={
                'request_id': request_id,
                'request_path': request.url.path,
                'request_method': request.method
            }
        )
        self._track_error(ErrorCode.REMOTE_TIMEOUT.value)

        return self._create_error_response(
            error_code=ErrorCode.REMOTE_TIMEOUT.value,
            message="Request processing timed out",
            request_id=request_id,
            status_code=504
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """
        Handle unexpected exceptions; the traceback goes to the log only.
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                'request_id': request_id,
                'exception_type': type(exc).__name__,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error(ErrorCode.INTERNAL_SERVER_ERROR.value)

        return self._create_error_response(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR.value,
            message="An internal server error occurred",
            request_id=request_id,
            status_code=500
        )

    def _create_error_response(
        self,
        error_code: str,
        message: str,
        request_id: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        content = {
            "error": message,
            "error_code": error_code,
            "details": details or {},
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc),
        }
        return JSONResponse(status_code=status_code, content=jsonable_encoder(content))

    def _track_error(self, error_code: str) -> None:
        current_time = time.time()

        self.error_counts[error_code] = self.error_counts.get(error_code, 0) + 1
        self.last_error_time[error_code] = current_time

        if self.error_counts[error_code] % 10 == 0:
            logger.warning(
                f"High frequency error detected: {error_code} occurred {self.error_counts[error_code]} times"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Error counts overall and for codes seen in the last hour.
        """
        current_time = time.time()

        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if current_time - self.last_error_time.get(code, 0) < 3600
            },
            'total_errors': sum(self.error_counts.values())
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Register the handlers on a FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(MoodLiftException)
    async def moodlift_exception_handler(request: Request, exc: MoodLiftException):
        return await error_handler.handle_moodlift_exception(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return await error_handler.handle_validation_error(request, exc)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
        fastapi_exc = HTTPException(status_code=exc.status_code, detail=exc.detail)
        return await error_handler.handle_http_exception(request, fastapi_exc)

    @app.exception_handler(asyncio.TimeoutError)
    async def timeout_exception_handler(request: Request, exc: asyncio.TimeoutError):
        return await error_handler.handle_timeout_error(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)
