from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class TestimonialWrite(BaseModel):
    id: Optional[str] = None
    user_name: Optional[str] = None
    user_title: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = None
    avatar_url: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class TestimonialRead(BaseModel):
    id: str
    user_name: str
    user_title: Optional[str] = None
    feedback: str
    rating: int
    avatar_url: Optional[str] = None
    is_active: bool
    display_order: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
