"""
SEO Service - Per-page metadata and the sitemap built from it
"""
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional, List, Dict
from urllib.parse import quote, urlsplit

from sqlalchemy import select

from moodlift.config.settings import get_settings
from moodlift.core.exceptions import MoodLiftException, RequestValidationFailed, NotFoundError
from moodlift.core.store import RemoteStore
from moodlift.models.seo import SeoMetadata
from moodlift.schemas.seo import SeoMetadataRead, SeoMetadataUpdate, SitemapEntry

logger = logging.getLogger(__name__)

STATIC_PATHS = [
    "/",
    "/about",
    "/blog",
    "/books",
    "/contact",
    "/discover",
    "/games",
    "/games&activities",
    "/mood-assessment",
    "/all-activities",
    "/dashboard",
    "/progress",
    "/rewards",
    "/privacy-policy",
]

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# characters encodeURIComponent leaves alone
_SEGMENT_SAFE = "-_.!~*'()"


def normalize_to_path(raw: str) -> str:
    """
    Reduce a stored page URL to a path

    Absolute URLs keep only their path; query and fragment are dropped;
    a leading slash is added. Blank input gives an empty string.
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        return ""

    lowered = trimmed.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return urlsplit(trimmed).path or "/"

    path = trimmed.split("#")[0].split("?")[0]
    return path if path.startswith("/") else f"/{path}"


def encode_path(path: str) -> str:
    """Percent-encode each segment so '&' and friends are XML-safe."""
    segments = path.split("/")
    return "/".join([""] + [quote(s, safe=_SEGMENT_SAFE) for s in segments[1:]])


def to_sitemap_url(origin: str, raw: str) -> str:
    path = normalize_to_path(raw)
    if not path:
        return ""
    return f"{origin}{encode_path(path)}"


def _priority(url: str) -> float:
    return 1.0 if urlsplit(url).path in ("", "/") else 0.7


def build_sitemap_entries(
    origin: str,
    seo_page_urls: List[str],
    now: Optional[datetime] = None
) -> List[SitemapEntry]:
    """
    Merge the static routes with every page that has SEO metadata

    Args:
        origin: Site origin without trailing slash
        seo_page_urls: `page_url` values from `seo_metadata`
        now: Timestamp used as last-modified for every entry

    Returns:
        Entries keyed by URL, static first; an SEO entry replaces a static one
        with the same URL.
    """
    now = now or datetime.now(timezone.utc)
    by_url: Dict[str, SitemapEntry] = {}

    for path in STATIC_PATHS:
        url = to_sitemap_url(origin, path)
        by_url[url] = SitemapEntry(url=url, last_modified=now, priority=_priority(url))

    for raw in seo_page_urls:
        url = to_sitemap_url(origin, raw)
        if not url:
            continue
        # re-inserting keeps the first position; the later entry wins
        by_url[url] = SitemapEntry(url=url, last_modified=now, priority=_priority(url))

    return list(by_url.values())


def render_sitemap_xml(entries: List[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        node = ET.SubElement(urlset, "url")
        ET.SubElement(node, "loc").text = entry.url
        ET.SubElement(node, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(node, "changefreq").text = entry.change_frequency
        ET.SubElement(node, "priority").text = f"{entry.priority:.1f}"
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


class SeoService:
    """Reads and updates `seo_metadata`"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_metadata(self) -> List[SeoMetadataRead]:
        async with self.store.session() as db:
            result = await db.execute(select(SeoMetadata).order_by(SeoMetadata.page_url.asc()))
            return [SeoMetadataRead.model_validate(m) for m in result.scalars().all()]

    async def get_for_page(self, page_url: str) -> Optional[SeoMetadataRead]:
        async with self.store.session() as db:
            result = await db.execute(select(SeoMetadata).where(SeoMetadata.page_url == page_url))
            row = result.scalar_one_or_none()
            return SeoMetadataRead.model_validate(row) if row else None

    async def update_metadata(self, payload: SeoMetadataUpdate) -> SeoMetadataRead:
        """
        Overwrite the editable fields of one page's metadata

        Raises:
            RequestValidationFailed: id missing
            NotFoundError: no row with that id
        """
        if not payload.id:
            raise RequestValidationFailed("ID is required")

        values = payload.model_dump(exclude_unset=True, exclude={"id"})
        async with self.store.session() as db:
            row = await db.get(SeoMetadata, payload.id)
            if row is None:
                raise NotFoundError("SEO metadata", payload.id)
            for field, value in values.items():
                setattr(row, field, value)
            row.updated_at = datetime.now(timezone.utc)
            await db.flush()
            await db.refresh(row)
            return SeoMetadataRead.model_validate(row)

    async def sitemap_entries(self) -> List[SitemapEntry]:
        """Sitemap entries; falls back to the static routes if metadata can't be read."""
        try:
            page_urls = [m.page_url for m in await self.list_metadata()]
        except MoodLiftException as e:
            logger.error(f"Error building SEO-based sitemap entries: {e.message}")
            page_urls = []
        return build_sitemap_entries(get_settings().site.origin, page_urls)
