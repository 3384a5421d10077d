"""
Favorites API endpoints - Per-user pins of games and books
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from moodlift.core.dependencies import get_current_session, get_favorites_store, require_session
from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.base import Envelope
from moodlift.schemas.favorite import (
    FavoriteItem,
    FavoriteToggleRequest,
    FavoriteToggleResult,
    FavoritesRead,
    ItemType,
    MutationStatus,
)
from moodlift.schemas.user import UserSession
from moodlift.services.favorite_items import list_favorite_items
from moodlift.services.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


def _mutation_envelope(favorites: FavoritesStore, item_id: str, item_type: ItemType) -> Envelope[FavoriteToggleResult]:
    record = favorites.mutations.get(item_id)
    status = record.status if record else None
    result = FavoriteToggleResult(
        item_id=item_id,
        item_type=item_type,
        favorited=favorites.is_favorite(item_id),
        status=status,
    )
    if status == MutationStatus.FAILED:
        return Envelope(status="error", data=result, error=record.error)
    return Envelope(status="ok", data=result)


@router.get("", response_model=Envelope[FavoritesRead])
async def list_favorites(
    session: Optional[UserSession] = Depends(get_current_session),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """
    Ids the caller has favorited; empty for anonymous callers
    """
    return Envelope(
        status="ok",
        data=FavoritesRead(
            user_id=session.user_id if session else None,
            favorites=sorted(favorites.favorites),
        )
    )


@router.get("/items", response_model=Envelope[list[FavoriteItem]])
async def list_favorite_item_details(
    session: Optional[UserSession] = Depends(get_current_session),
    store: RemoteStore = Depends(get_store),
):
    """
    Favorites resolved to their game and book rows
    """
    if session is None:
        return Envelope(status="ok", data=[])
    try:
        items = await list_favorite_items(store, session.user_id)
    except MoodLiftException as e:
        logger.error(f"Error fetching favorite items: {e.message}", extra={"user_id": session.user_id})
        return Envelope(status="error", data=[], error=e.message)
    return Envelope(status="ok", data=items)


@router.post("/toggle", response_model=Envelope[FavoriteToggleResult])
async def toggle_favorite(
    body: FavoriteToggleRequest,
    session: UserSession = Depends(require_session),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """
    Flip the favorite state of a game or book

    - **item_id**: Game or book id
    - **item_type**: game or book
    """
    await favorites.toggle(body.item_id, body.item_type)
    return _mutation_envelope(favorites, body.item_id, body.item_type)


@router.delete("/{item_type}/{item_id}", response_model=Envelope[FavoriteToggleResult])
async def remove_favorite(
    item_type: ItemType,
    item_id: str,
    session: UserSession = Depends(require_session),
    favorites: FavoritesStore = Depends(get_favorites_store),
):
    """
    Remove a favorite; succeeds when it was not a favorite
    """
    await favorites.remove(item_id, item_type)
    return _mutation_envelope(favorites, item_id, item_type)
