from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class BookWrite(BaseModel):
    """Admin payload for creating or updating a book; required fields are checked by the service."""
    id: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    cover_color: Optional[str] = None
    genre: Optional[str] = None
    cover_image_url: Optional[str] = None
    affiliate_link: Optional[str] = None
    amazon_affiliate_link: Optional[str] = None
    flipkart_affiliate_link: Optional[str] = None
    recommended_by: Optional[str] = None
    recommendation_reason: Optional[str] = None
    rating: Optional[float] = None
    mood_tags: Optional[list[str]] = None


class BookRead(BaseModel):
    id: str
    title: str
    author: str
    description: Optional[str] = None
    cover_color: str
    genre: str
    cover_image_url: Optional[str] = None
    affiliate_link: Optional[str] = None
    amazon_affiliate_link: Optional[str] = None
    flipkart_affiliate_link: Optional[str] = None
    recommended_by: Optional[str] = None
    recommendation_reason: Optional[str] = None
    rating: Optional[float] = None
    mood_tags: list[str] = []
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
