import uuid

from sqlalchemy import Column, String, Text, DateTime, func
from moodlift.core.db import Base


class SeoMetadata(Base):
    __tablename__ = "seo_metadata"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    page_url = Column(String(512), nullable=False, unique=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    keywords = Column(Text, nullable=True)
    og_image = Column(Text, nullable=True)
    og_title = Column(String(255), nullable=True)
    og_description = Column(Text, nullable=True)
    twitter_card = Column(String(64), nullable=True)
    canonical_url = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
