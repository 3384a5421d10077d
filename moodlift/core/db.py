from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from typing import Optional
import logging

from moodlift.config.settings import get_settings

logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for models
Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _build_engine(url: str) -> AsyncEngine:
    settings = get_settings()
    kwargs = {"echo": settings.database.echo}
    if not url.startswith("sqlite"):
        kwargs["pool_pre_ping"] = True
    return create_async_engine(url, **kwargs)


def configure_engine(engine: Optional[AsyncEngine]) -> None:
    """Install an engine (or clear it with None). Used at startup and by tests."""
    global _engine, _session_factory
    _engine = engine
    _session_factory = (
        async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        if engine is not None else None
    )


def get_session_factory() -> Optional[async_sessionmaker[AsyncSession]]:
    """Return the session factory, creating the engine from settings on first use.

    Returns None when no database URL is configured.
    """
    if _session_factory is None:
        url = get_settings().database.url
        if not url:
            return None
        logger.info("Creating database engine")
        configure_engine(_build_engine(url))
    return _session_factory


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def create_all() -> None:
    """Create missing tables. Used for local development and tests."""
    import moodlift.models  # noqa: F401  registers tables on Base.metadata

    if get_session_factory() is None or _engine is None:
        return
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
