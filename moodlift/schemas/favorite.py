from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional


class ItemType(str, Enum):
    GAME = "game"
    BOOK = "book"


class MutationStatus(str, Enum):
    """Lifecycle of one favorite mutation against the remote table."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class FavoriteToggleRequest(BaseModel):
    item_id: str = Field(..., min_length=1, max_length=64)
    item_type: ItemType


class FavoriteToggleResult(BaseModel):
    item_id: str
    item_type: ItemType
    favorited: bool
    status: Optional[MutationStatus] = None


class FavoritesRead(BaseModel):
    user_id: Optional[str] = None
    favorites: list[str] = []


class FavoriteItem(BaseModel):
    """A favorite resolved to the book or game it pins."""
    id: str
    title: str
    type: ItemType
    description: Optional[str] = None
    author: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    genre: Optional[str] = None
    category: Optional[str] = None
    cover_image_url: Optional[str] = None
