import uuid

from sqlalchemy import Column, String, Text, Integer, Boolean
from moodlift.core.db import Base


class Faq(Base):
    __tablename__ = "faqs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    page = Column(String(128), nullable=False, index=True)  # page slug, e.g. "home", "books"
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
