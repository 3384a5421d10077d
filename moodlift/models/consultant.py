import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, func
from moodlift.core.db import Base


class Consultant(Base):
    __tablename__ = "consultants"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)
    picture_url = Column(Text, nullable=True)
    booking_url = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
