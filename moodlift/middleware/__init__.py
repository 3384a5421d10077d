"""
Middleware package for the FastAPI application.
"""

from .admin_auth import AdminKeyMiddleware
from .redirects import LegacyRedirectMiddleware
from .request_context import RequestContextMiddleware

__all__ = ["AdminKeyMiddleware", "LegacyRedirectMiddleware", "RequestContextMiddleware"]
