"""
Dependency providers for FastAPI routes.

The favorites store is built per request for the caller's session and loaded
before the handler runs.
"""

from fastapi import Depends, Request
from typing import Optional
import logging

from moodlift.core.exceptions import AuthenticationRequiredError
from moodlift.core.jwt import decode_token
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.user import UserSession
from moodlift.services.favorites_store import FavoritesRepository, FavoritesStore

logger = logging.getLogger(__name__)


async def get_current_session(request: Request) -> Optional[UserSession]:
    """
    Read the caller's session from a bearer access token.

    Returns:
        UserSession, or None for anonymous callers and unverifiable tokens
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None

    payload = decode_token(auth_header[len("Bearer "):].strip())
    if not payload or not payload.get("sub"):
        logger.debug("Ignoring unverifiable access token", extra={"path": request.url.path})
        return None

    return UserSession(
        user_id=str(payload["sub"]),
        email=payload.get("email"),
        role=payload.get("role") or "authenticated",
    )


async def require_session(
    session: Optional[UserSession] = Depends(get_current_session),
) -> UserSession:
    """
    Raises:
        AuthenticationRequiredError: no valid session on the request
    """
    if session is None:
        raise AuthenticationRequiredError()
    return session


async def get_favorites_store(
    session: Optional[UserSession] = Depends(get_current_session),
    store: RemoteStore = Depends(get_store),
) -> FavoritesStore:
    """Favorites store for the caller, already loaded from the remote table."""
    favorites = FavoritesStore(FavoritesRepository(store))
    await favorites.set_user(session)
    return favorites
