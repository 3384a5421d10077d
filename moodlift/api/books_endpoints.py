"""
Book API endpoints - Mood-based book recommendations
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from moodlift.core.dependencies import get_current_session
from moodlift.core.exceptions import MoodLiftException, NotFoundError
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.base import Envelope
from moodlift.schemas.book import BookRead
from moodlift.schemas.user import UserSession
from moodlift.services.assessment_service import AssessmentService
from moodlift.services.book_service import BookService, DEFAULT_BOOK_LIMIT, MOOD_OPTIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=Envelope[list[BookRead]])
async def list_books(
    mood: Optional[str] = Query(None, description=f"One of: {', '.join(MOOD_OPTIONS)}"),
    show_all: bool = False,
    limit: int = Query(DEFAULT_BOOK_LIMIT, ge=1, le=100),
    store: RemoteStore = Depends(get_store),
):
    """
    Books ordered by rating

    - **mood**: Only books tagged with this mood result
    - **show_all**: Ignore the mood filter
    - **limit**: Max results (default 6)
    """
    try:
        books = await BookService(store).list_for_mood(mood, show_all, limit)
    except MoodLiftException as e:
        logger.error(f"Error fetching books: {e.message}")
        return Envelope(status="error", data=[], error=e.message)
    return Envelope(status="ok", data=books)


@router.get("/recommended", response_model=Envelope[list[BookRead]])
async def recommended_books(
    limit: int = Query(DEFAULT_BOOK_LIMIT, ge=1, le=100),
    session: Optional[UserSession] = Depends(get_current_session),
    store: RemoteStore = Depends(get_store),
):
    """
    Books for the caller's most recent assessment result; top rated when there is none
    """
    try:
        mood = await AssessmentService(store).latest_mood_result(session.user_id) if session else None
        books = await BookService(store).list_for_mood(mood, show_all=mood is None, limit=limit)
    except MoodLiftException as e:
        logger.error(f"Error fetching recommended books: {e.message}")
        return Envelope(status="error", data=[], error=e.message)
    return Envelope(status="ok", data=books)


@router.get("/{book_id}", response_model=Envelope[BookRead])
async def get_book(
    book_id: str,
    store: RemoteStore = Depends(get_store),
):
    try:
        book = await BookService(store).get_book(book_id)
    except MoodLiftException as e:
        logger.error(f"Error fetching book: {e.message}", extra={"book_id": book_id})
        return Envelope(status="error", data=None, error=e.message)
    if book is None:
        raise NotFoundError("Book", book_id)
    return Envelope(status="ok", data=book)
