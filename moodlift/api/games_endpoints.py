"""
Game API endpoints - Wellness games catalog
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.base import Envelope
from moodlift.schemas.game import GameWithDetails
from moodlift.services.game_service import GameService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("", response_model=Envelope[list[GameWithDetails]])
async def list_games(
    category: Optional[str] = None,
    store: RemoteStore = Depends(get_store),
):
    """
    Games with mood benefits, duration and page URL

    - **category**: Optional category filter (e.g. Breathing)
    """
    try:
        games = await GameService(store).list_catalog(category)
    except MoodLiftException as e:
        logger.error(f"Error fetching games: {e.message}")
        return Envelope(status="error", data=[], error=e.message)
    return Envelope(status="ok", data=games)
