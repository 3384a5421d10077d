from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class GameWrite(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    icon: Optional[str] = None
    color_from: Optional[str] = None
    color_to: Optional[str] = None
    cover_image_url: Optional[str] = None
    is_popular: Optional[bool] = None


class GameRead(BaseModel):
    id: str
    title: str
    description: str
    category: str
    icon: str
    colors: Optional[str] = None
    color_from: str
    color_to: str
    cover_image_url: Optional[str] = None
    is_popular: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class GameDetails(BaseModel):
    mood_benefits: list[str]
    duration: str
    how_it_helps: str
    game_url: str


class GameWithDetails(GameRead):
    details: GameDetails
