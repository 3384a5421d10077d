"""
Consultant Service - Public consultant list and admin CRUD on `consultants`
"""
import logging
from typing import Optional, List

from sqlalchemy import select, delete

from moodlift.core.exceptions import RequestValidationFailed, NotFoundError
from moodlift.core.store import RemoteStore
from moodlift.models.consultant import Consultant
from moodlift.schemas.consultant import ConsultantRead, ConsultantWrite

logger = logging.getLogger(__name__)

PUBLIC_CONSULTANT_LIMIT = 12


class ConsultantService:
    """Reads and writes the `consultants` table"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def list_consultants(self) -> List[ConsultantRead]:
        """Every consultant, newest first (admin listing)."""
        async with self.store.session() as db:
            result = await db.execute(
                select(Consultant).order_by(Consultant.created_at.desc(), Consultant.id)
            )
            return [ConsultantRead.model_validate(c) for c in result.scalars().all()]

    async def list_active(self, limit: int = PUBLIC_CONSULTANT_LIMIT) -> List[ConsultantRead]:
        async with self.store.session() as db:
            result = await db.execute(
                select(Consultant)
                .where(Consultant.is_active.is_(True))
                .order_by(Consultant.created_at.desc(), Consultant.id)
                .limit(limit)
            )
            return [ConsultantRead.model_validate(c) for c in result.scalars().all()]

    async def get_consultant(self, consultant_id: str) -> Optional[ConsultantRead]:
        async with self.store.session() as db:
            consultant = await db.get(Consultant, consultant_id)
            return ConsultantRead.model_validate(consultant) if consultant else None

    async def create_consultant(self, payload: ConsultantWrite) -> ConsultantRead:
        """
        Insert a consultant and return the stored row

        Raises:
            RequestValidationFailed: full_name missing
        """
        if not payload.full_name:
            raise RequestValidationFailed("Full name is required")

        consultant = Consultant(
            full_name=payload.full_name,
            title=payload.title or None,
            picture_url=payload.picture_url or None,
            booking_url=payload.booking_url or None,
            is_active=True if payload.is_active is None else bool(payload.is_active),
        )
        async with self.store.session() as db:
            db.add(consultant)
            await db.flush()
            consultant_id = consultant.id

        logger.info(f"Created consultant {consultant_id}", extra={"consultant_id": consultant_id})
        return await self._refetch(consultant_id)

    async def update_consultant(self, payload: ConsultantWrite) -> ConsultantRead:
        if not payload.id:
            raise RequestValidationFailed("Consultant ID is required")

        values = payload.model_dump(exclude_unset=True, exclude={"id"})
        async with self.store.session() as db:
            consultant = await db.get(Consultant, payload.id)
            if consultant is None:
                raise NotFoundError("Consultant", payload.id)
            for field, value in values.items():
                setattr(consultant, field, value)

        return await self._refetch(payload.id)

    async def delete_consultant(self, consultant_id: Optional[str]) -> None:
        if not consultant_id:
            raise RequestValidationFailed("Consultant ID is required")
        async with self.store.session() as db:
            await db.execute(delete(Consultant).where(Consultant.id == consultant_id))

    async def _refetch(self, consultant_id: str) -> ConsultantRead:
        consultant = await self.get_consultant(consultant_id)
        if consultant is None:
            raise NotFoundError("Consultant", consultant_id)
        return consultant
