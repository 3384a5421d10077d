"""
Admin key middleware for the `/api/admin` routes.

Only active when `SECURITY_REQUIRE_ADMIN_KEY` is true; the admin dashboard's
own login check (`check-admin`) stays public.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging
from typing import Optional, Set

from moodlift.config.settings import get_settings
from moodlift.core.exceptions import ErrorCode

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/api/admin"


class AdminKeyMiddleware(BaseHTTPMiddleware):
    """
    Rejects admin requests that lack a valid key in the configured header.
    """

    def __init__(self, app, valid_api_keys: Optional[Set[str]] = None):
        super().__init__(app)
        self._valid_api_keys = valid_api_keys
        self.public_paths = {
            f"{ADMIN_PREFIX}/check-admin",
        }

    @property
    def valid_api_keys(self) -> Set[str]:
        if self._valid_api_keys is not None:
            return self._valid_api_keys
        return set(get_settings().security.admin_api_keys)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not path.startswith(ADMIN_PREFIX) or path in self.public_paths:
            return await call_next(request)

        security = get_settings().security
        if not security.require_admin_key:
            return await call_next(request)

        request_id = getattr(request.state, 'request_id', 'unknown')
        api_key = request.headers.get(security.admin_key_header)

        if not api_key:
            logger.warning(
                f"Missing admin key for request {request_id}",
                extra={
                    'request_id': request_id,
                    'path': path,
                    'client_ip': request.client.host if request.client else 'unknown'
                }
            )
            return JSONResponse(
                status_code=401,
                content={
                    "error": f"Admin key required in {security.admin_key_header} header",
                    "error_code": ErrorCode.MISSING_ADMIN_KEY.value,
                    "request_id": request_id
                }
            )

        if api_key not in self.valid_api_keys:
            logger.warning(
                f"Invalid admin key for request {request_id}",
                extra={
                    'request_id': request_id,
                    'path': path,
                    'api_key_prefix': api_key[:4] + "..." if len(api_key) > 4 else "***"
                }
            )
            return JSONResponse(
                status_code=403,
                content={
                    "error": "Invalid admin key provided",
                    "error_code": ErrorCode.INVALID_ADMIN_KEY.value,
                    "request_id": request_id
                }
            )

        return await call_next(request)
