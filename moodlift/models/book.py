import uuid

from sqlalchemy import Column, String, Text, Float, DateTime, JSON, func
from moodlift.core.db import Base


DEFAULT_COVER_COLOR = "#9b87f5"
DEFAULT_GENRE = "Self-Help"


class Book(Base):
    __tablename__ = "books"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    cover_color = Column(String(32), nullable=False, default=DEFAULT_COVER_COLOR)
    genre = Column(String(64), nullable=False, default=DEFAULT_GENRE)
    cover_image_url = Column(Text, nullable=True)
    affiliate_link = Column(Text, nullable=True)
    amazon_affiliate_link = Column(Text, nullable=True)
    flipkart_affiliate_link = Column(Text, nullable=True)
    recommended_by = Column(String(255), nullable=True)
    recommendation_reason = Column(Text, nullable=True)
    rating = Column(Float, nullable=True)
    mood_tags = Column(JSON, nullable=False, default=list)  # mood result labels, e.g. ["Good", "Needs Support"]
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Book id={self.id} title={self.title!r}>"
