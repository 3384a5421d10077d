"""
Game Service - Games catalog and admin CRUD on `games`
"""
import logging
from typing import Optional, List, Iterable

from sqlalchemy import select, delete

from moodlift.core.exceptions import RequestValidationFailed, NotFoundError
from moodlift.core.store import RemoteStore
from moodlift.models.game import (
    Game,
    DEFAULT_CATEGORY,
    DEFAULT_ICON,
    DEFAULT_COLOR_FROM,
    DEFAULT_COLOR_TO,
)
from moodlift.schemas.game import GameRead, GameWrite, GameWithDetails
from moodlift.services.game_catalog import get_game_details

logger = logging.getLogger(__name__)


def join_colors(color_from: Optional[str], color_to: Optional[str]) -> str:
    return f"{color_from or DEFAULT_COLOR_FROM}-{color_to or DEFAULT_COLOR_TO}"


class GameService:
    """Reads and writes the `games` table"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_games(self) -> List[GameRead]:
        """All games, newest first (admin listing)."""
        async with self.store.session() as db:
            result = await db.execute(select(Game).order_by(Game.created_at.desc(), Game.id))
            return [GameRead.model_validate(g) for g in result.scalars().all()]

    async def list_catalog(self, category: Optional[str] = None) -> List[GameWithDetails]:
        """
        Games in creation order merged with their static details

        Args:
            category: Optional category filter

        Returns:
            List of games with mood benefits, duration and page URL
        """
        stmt = select(Game).order_by(Game.created_at.asc(), Game.id)
        if category:
            stmt = stmt.where(Game.category == category)
        async with self.store.session() as db:
            result = await db.execute(stmt)
            games = result.scalars().all()
            return [
                GameWithDetails(
                    **GameRead.model_validate(g).model_dump(),
                    details=get_game_details(g.title),
                )
                for g in games
            ]

    async def get_games(self, game_ids: Iterable[str]) -> List[GameRead]:
        ids = list(game_ids)
        if not ids:
            return []
        async with self.store.session() as db:
            result = await db.execute(select(Game).where(Game.id.in_(ids)))
            return [GameRead.model_validate(g) for g in result.scalars().all()]

    async def create_game(self, payload: GameWrite) -> GameRead:
        """
        Insert a game with category, icon and colour defaults

        Raises:
            RequestValidationFailed: title or description missing
        """
        if not payload.title or not payload.description:
            raise RequestValidationFailed("Title and description are required")

        game = Game(
            title=payload.title,
            description=payload.description,
            category=payload.category or DEFAULT_CATEGORY,
            icon=payload.icon or DEFAULT_ICON,
            colors=join_colors(payload.color_from, payload.color_to),
            cover_image_url=payload.cover_image_url or None,
            is_popular=bool(payload.is_popular),
        )
        async with self.store.session() as db:
            db.add(game)
            await db.flush()
            await db.refresh(game)
            created = GameRead.model_validate(game)

        logger.info(f"Created game {created.id}", extra={"game_id": created.id})
        return created

    async def update_game(self, payload: GameWrite) -> GameRead:
        """
        Update a game; colours are always rewritten from the payload

        Raises:
            RequestValidationFailed: id missing
            NotFoundError: no game with that id
        """
        if not payload.id:
            raise RequestValidationFailed("Game ID is required")

        async with self.store.session() as db:
            game = await db.get(Game, payload.id)
            if game is None:
                raise NotFoundError("Game", payload.id)
            for field in ("title", "description", "category", "icon"):
                value = getattr(payload, field)
                if value is not None:
                    setattr(game, field, value)
            if payload.cover_image_url:
                game.cover_image_url = payload.cover_image_url
            if payload.is_popular is not None:
                game.is_popular = payload.is_popular
            game.colors = join_colors(payload.color_from, payload.color_to)
            await db.flush()
            await db.refresh(game)
            return GameRead.model_validate(game)

    async def delete_game(self, game_id: Optional[str]) -> None:
        if not game_id:
            raise RequestValidationFailed("Game ID is required")
        async with self.store.session() as db:
            await db.execute(delete(Game).where(Game.id == game_id))
