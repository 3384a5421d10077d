import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, func
from moodlift.core.db import Base


DEFAULT_CATEGORY = "Breathing"
DEFAULT_ICON = "heart"
DEFAULT_COLOR_FROM = "#3B82F6"
DEFAULT_COLOR_TO = "#8B5CF6"


class Game(Base):
    __tablename__ = "games"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(64), nullable=False, default=DEFAULT_CATEGORY)
    icon = Column(String(64), nullable=False, default=DEFAULT_ICON)
    colors = Column(String(32), nullable=True)  # "<from>-<to>"
    cover_image_url = Column(Text, nullable=True)
    is_popular = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @property
    def color_from(self) -> str:
        return (self.colors or "").split("-")[0] or DEFAULT_COLOR_FROM

    @property
    def color_to(self) -> str:
        parts = (self.colors or "").split("-")
        return parts[1] if len(parts) > 1 and parts[1] else DEFAULT_COLOR_TO
