"""
Client for the hosted relational store.

Every table read or write goes through `RemoteStore.session()`, which is the
one place where a missing configuration becomes `StoreConfigurationError` and
a driver failure becomes `RemoteStoreError`.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from moodlift.core.db import get_session_factory
from moodlift.core.exceptions import (
    RemoteStoreError,
    RemoteTimeoutError,
    StoreConfigurationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RemoteStore:
    """Unit-of-work wrapper around the async session factory."""

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]]):
        self._session_factory = session_factory

    @property
    def configured(self) -> bool:
        return self._session_factory is not None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session, commit on success and roll back on failure.

        Raises:
            StoreConfigurationError: no database URL is configured
            RemoteStoreError: the query or commit failed
        """
        if self._session_factory is None:
            raise StoreConfigurationError(["DATABASE_URL"])

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            raise RemoteStoreError(str(e.orig) if getattr(e, "orig", None) else str(e)) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def with_timeout(self, operation: str, awaitable: Awaitable[T], timeout_seconds: float) -> T:
        """Await a store call, raising RemoteTimeoutError once the budget is spent."""
        try:
            return await asyncio.wait_for(awaitable, timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"{operation} timed out after {timeout_seconds}s")
            raise RemoteTimeoutError(operation, timeout_seconds)


def get_store() -> RemoteStore:
    """FastAPI dependency for the relational store."""
    return RemoteStore(get_session_factory())
