"""
Assessment API endpoints - Mood questionnaires
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from moodlift.core.dependencies import get_current_session
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.assessment import AssessmentResultRead, AssessmentSubmission
from moodlift.schemas.base import Envelope
from moodlift.schemas.user import UserSession
from moodlift.services.assessment_service import AssessmentService

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


@router.post("", response_model=Envelope[AssessmentResultRead], status_code=status.HTTP_201_CREATED)
async def submit_assessment(
    submission: AssessmentSubmission,
    session: Optional[UserSession] = Depends(get_current_session),
    store: RemoteStore = Depends(get_store),
):
    """
    Score a completed questionnaire

    - **test_type**: phq9, gad7 or panas
    - **responses**: Answers in question order (0-3, or 1-5 for panas)
    - **user_session**: Optional anonymous session marker
    """
    result = await AssessmentService(store).submit(
        submission,
        user_id=session.user_id if session else None,
    )
    return Envelope(status="ok", data=result)
