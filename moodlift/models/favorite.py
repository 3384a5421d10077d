from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint, func
from moodlift.core.db import Base


class UserFavorite(Base):
    __tablename__ = "user_favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "item_type", "item_id", name="uq_user_favorites_user_item"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    item_type = Column(String(16), nullable=False)  # game, book
    item_id = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
