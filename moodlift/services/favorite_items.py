"""Resolve a user's favorites to the game and book rows they pin."""

from typing import List

from moodlift.core.store import RemoteStore
from moodlift.schemas.favorite import FavoriteItem, ItemType
from moodlift.services.book_service import BookService
from moodlift.services.favorites_store import FavoritesRepository
from moodlift.services.game_service import GameService


async def list_favorite_items(store: RemoteStore, user_id: str) -> List[FavoriteItem]:
    """
    Games first, then books. Favorites whose row no longer exists are skipped.

    Raises:
        StoreConfigurationError, RemoteStoreError: the store is unusable
    """
    pairs = await FavoritesRepository(store).list_favorites(user_id)
    game_ids = [item_id for item_type, item_id in pairs if item_type == ItemType.GAME.value]
    book_ids = [item_id for item_type, item_id in pairs if item_type == ItemType.BOOK.value]

    items: List[FavoriteItem] = []
    for game in await GameService(store).get_games(game_ids):
        items.append(FavoriteItem(
            id=game.id,
            title=game.title,
            description=game.description,
            type=ItemType.GAME,
            color=game.color_from,
            icon=game.icon,
            category=game.category,
        ))
    for book in await BookService(store).get_books(book_ids):
        items.append(FavoriteItem(
            id=book.id,
            title=book.title,
            description=book.description,
            type=ItemType.BOOK,
            author=book.author,
            color=book.cover_color,
            genre=book.genre,
            cover_image_url=book.cover_image_url,
        ))
    return items
