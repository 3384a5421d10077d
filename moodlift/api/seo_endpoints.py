"""
SEO endpoints - Page metadata and sitemap
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.base import Envelope
from moodlift.schemas.seo import SeoMetadataRead
from moodlift.services.seo_service import SeoService, render_sitemap_xml

logger = logging.getLogger(__name__)

router = APIRouter(tags=["seo"])


@router.get("/api/seo", response_model=Envelope[Optional[SeoMetadataRead]])
async def get_seo_metadata(
    page_url: str = Query(..., min_length=1),
    store: RemoteStore = Depends(get_store),
):
    """
    Metadata for one page; `data` is null when the page has none
    """
    try:
        metadata = await SeoService(store).get_for_page(page_url)
    except MoodLiftException as e:
        logger.error(f"Error fetching SEO metadata: {e.message}", extra={"page_url": page_url})
        return Envelope(status="error", data=None, error=e.message)
    return Envelope(status="ok", data=metadata)


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(store: RemoteStore = Depends(get_store)):
    entries = await SeoService(store).sitemap_entries()
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")
