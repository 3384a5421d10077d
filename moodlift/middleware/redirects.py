"""Permanent redirects for retired page paths."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse
import logging

logger = logging.getLogger(__name__)

LEGACY_REDIRECTS = {
    "/games": "/games-and-activities",
    "/games/": "/games-and-activities",
    "/games&activities": "/games-and-activities",
    "/games%26activities": "/games-and-activities",
    "/all-activities/": "/all-activities",
}


def legacy_redirect_target(raw_path: str) -> str | None:
    """Destination path for a retired path, or None."""
    return LEGACY_REDIRECTS.get(raw_path)


class LegacyRedirectMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        # raw_path keeps "%26" distinct from "&"
        raw_path = (request.scope.get("raw_path") or b"").decode("latin-1").split("?", 1)[0] or request.url.path
        target = legacy_redirect_target(raw_path) or legacy_redirect_target(request.url.path)
        if target is None:
            return await call_next(request)

        query = request.url.query
        location = f"{target}?{query}" if query else target
        logger.debug(f"Redirecting {raw_path} to {location}")
        return RedirectResponse(location, status_code=301)
