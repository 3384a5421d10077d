from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class SeoMetadataUpdate(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_image: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    twitter_card: Optional[str] = None
    canonical_url: Optional[str] = None


class SeoMetadataRead(BaseModel):
    id: str
    page_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_image: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    twitter_card: Optional[str] = None
    canonical_url: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SitemapEntry(BaseModel):
    url: str
    last_modified: datetime
    change_frequency: str = "weekly"
    priority: float
