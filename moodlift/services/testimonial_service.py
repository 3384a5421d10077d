"""
Testimonial Service - Active testimonials and admin CRUD on `testimonials`
"""
import logging
from typing import Optional, List

from sqlalchemy import select, delete

from moodlift.core.exceptions import RequestValidationFailed, NotFoundError
from moodlift.core.store import RemoteStore
from moodlift.models.testimonial import Testimonial
from moodlift.schemas.testimonial import TestimonialRead, TestimonialWrite

logger = logging.getLogger(__name__)


class TestimonialService:
    """Reads and writes the `testimonials` table"""

    __test__ = False  # keep pytest from collecting this class

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_testimonials(self, active_only: bool = False) -> List[TestimonialRead]:
        """
        Testimonials in display order

        Args:
            active_only: Restrict to rows flagged active (public carousel)
        """
        stmt = select(Testimonial).order_by(Testimonial.display_order.asc(), Testimonial.created_at.asc())
        if active_only:
            stmt = stmt.where(Testimonial.is_active.is_(True))
        async with self.store.session() as db:
            result = await db.execute(stmt)
            return [TestimonialRead.model_validate(t) for t in result.scalars().all()]

    async def create_testimonial(self, payload: TestimonialWrite) -> TestimonialRead:
        if not payload.user_name or not payload.feedback:
            raise RequestValidationFailed("User name and feedback are required")

        testimonial = Testimonial(
            user_name=payload.user_name,
            user_title=payload.user_title or None,
            feedback=payload.feedback,
            rating=payload.rating or 5,
            avatar_url=payload.avatar_url or None,
            is_active=payload.is_active is not False,
            display_order=payload.display_order or 0,
        )
        async with self.store.session() as db:
            db.add(testimonial)
            await db.flush()
            await db.refresh(testimonial)
            return TestimonialRead.model_validate(testimonial)

    async def update_testimonial(self, payload: TestimonialWrite) -> TestimonialRead:
        if not payload.id:
            raise RequestValidationFailed("Testimonial ID is required")

        values = payload.model_dump(exclude_unset=True, exclude={"id"})
        async with self.store.session() as db:
            testimonial = await db.get(Testimonial, payload.id)
            if testimonial is None:
                raise NotFoundError("Testimonial", payload.id)
            for field, value in values.items():
                setattr(testimonial, field, value)
            await db.flush()
            await db.refresh(testimonial)
            return TestimonialRead.model_validate(testimonial)

    async def delete_testimonial(self, testimonial_id: Optional[str]) -> None:
        if not testimonial_id:
            raise RequestValidationFailed("Testimonial ID is required")
        async with self.store.session() as db:
            await db.execute(delete(Testimonial).where(Testimonial.id == testimonial_id))
