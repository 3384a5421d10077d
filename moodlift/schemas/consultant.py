from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ConsultantWrite(BaseModel):
    id: Optional[str] = None
    full_name: Optional[str] = None
    title: Optional[str] = None
    picture_url: Optional[str] = None
    booking_url: Optional[str] = None
    is_active: Optional[bool] = None


class ConsultantRead(BaseModel):
    id: str
    full_name: str
    title: Optional[str] = None
    picture_url: Optional[str] = None
    booking_url: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
