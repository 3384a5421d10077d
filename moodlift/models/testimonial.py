import uuid

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, func
from moodlift.core.db import Base


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_name = Column(String(255), nullable=False)
    user_title = Column(String(255), nullable=True)
    feedback = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)
    avatar_url = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
