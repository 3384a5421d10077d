"""
Mood assessment model: one row per completed questionnaire.
"""
import uuid

from sqlalchemy import Column, String, Integer, DateTime, JSON, func
from moodlift.core.db import Base


class MoodAssessment(Base):
    __tablename__ = "mood_assessments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=True, index=True)  # anonymous takers only carry user_session
    user_session = Column(String(128), nullable=True)
    test_type = Column(String(16), nullable=False)  # phq9, gad7, panas
    responses = Column(JSON, nullable=False)  # [{question, answer, score}]
    mood_result = Column(String(64), nullable=False)  # severity label
    mood_score = Column(Integer, nullable=False)
    recommendations = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
