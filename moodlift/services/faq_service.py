from typing import List

from sqlalchemy import select

from moodlift.core.exceptions import RequestValidationFailed
from moodlift.core.store import RemoteStore
from moodlift.models.faq import Faq
from moodlift.schemas.faq import FaqRead


class FaqService:
    """Active FAQs for one page"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_for_page(self, page: str) -> List[FaqRead]:
        if not page:
            raise RequestValidationFailed("Page parameter required")
        async with self.store.session() as db:
            result = await db.execute(
                select(Faq)
                .where(Faq.page == page, Faq.active.is_(True))
                .order_by(Faq.sort_order.asc(), Faq.id)
            )
            return [FaqRead.model_validate(f) for f in result.scalars().all()]
