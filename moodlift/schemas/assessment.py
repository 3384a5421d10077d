"""
Assessment schemas for API requests/responses
"""
from pydantic import BaseModel, Field
from typing import Optional

from moodlift.schemas.book import BookRead


class AssessmentSubmission(BaseModel):
    """Answers to one questionnaire, in question order"""
    test_type: str = Field(..., description="phq9, gad7 or panas")
    responses: list[int]
    user_session: Optional[str] = Field(None, max_length=128)


class AssessmentResultRead(BaseModel):
    test_type: str
    total_score: int
    severity: str
    interpretation: str
    recommendations: list[str]
    mood_result: str = Field(description="Excellent, Good, Moderate or Needs Support")
    mood_type: str
    recommended_games: list[str] = []
    recommended_books: list[BookRead] = []
