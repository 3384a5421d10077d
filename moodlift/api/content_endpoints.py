"""
Public content endpoints - testimonials, FAQs and consultants.

FAQ and consultant reads never fail the page: store errors come back as
200 with an empty list and an `error` message.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.base import Envelope
from moodlift.schemas.testimonial import TestimonialRead
from moodlift.services.consultant_service import ConsultantService
from moodlift.services.faq_service import FaqService
from moodlift.services.testimonial_service import TestimonialService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/testimonials", response_model=Envelope[list[TestimonialRead]])
async def list_testimonials(store: RemoteStore = Depends(get_store)):
    """
    Active testimonials in display order
    """
    try:
        testimonials = await TestimonialService(store).list_testimonials(active_only=True)
    except MoodLiftException as e:
        logger.error(f"Error fetching testimonials: {e.message}")
        return Envelope(status="error", data=[], error=e.message)
    return Envelope(status="ok", data=testimonials)


@router.get("/faqs")
async def list_faqs(
    page: Optional[str] = None,
    store: RemoteStore = Depends(get_store),
):
    """
    Active FAQs for a page

    - **page**: Page slug (required)
    """
    if not page:
        return JSONResponse(status_code=400, content={"data": [], "error": "Page parameter required"})

    try:
        faqs = await FaqService(store).list_for_page(page)
    except MoodLiftException as e:
        logger.error(f"Error fetching public FAQs: {e.message}", extra={"page": page})
        return {"data": [], "error": e.message}
    return {"data": [f.model_dump() for f in faqs]}


@router.get("/consultants")
async def list_consultants(store: RemoteStore = Depends(get_store)):
    """
    Up to 12 active consultants, newest first
    """
    try:
        consultants = await ConsultantService(store).list_active()
    except MoodLiftException as e:
        logger.error(f"Error fetching public consultants: {e.message}")
        return {"consultants": [], "error": e.message}
    return {"consultants": [c.model_dump(mode="json") for c in consultants]}
