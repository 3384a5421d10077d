"""
Shared fixtures: in-memory database, app client and session helpers
"""
import os

# settings are read at import time
os.environ.pop("DATABASE_URL", None)
os.environ["ENVIRONMENT"] = "testing"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret-with-enough-length-for-hs256"
os.environ["LOG_FORMAT"] = "text"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from moodlift.config.settings import get_settings, use_settings
from moodlift.core import db as core_db
from moodlift.core.jwt import create_access_token
from moodlift.core.store import RemoteStore
from moodlift.main import app
import moodlift.models  # noqa: F401


@pytest.fixture
def override_settings():
    """Swap the process settings for the duration of a test.

    Usage: override_settings(environment=Environment.DEVELOPMENT, supabase={"url": ...})
    """
    original = get_settings()

    def _apply(**updates):
        current = get_settings()
        resolved = {}
        for key, value in updates.items():
            if isinstance(value, dict):
                resolved[key] = getattr(current, key).model_copy(update=value)
            else:
                resolved[key] = value
        return use_settings(current.model_copy(update=resolved))

    yield _apply
    use_settings(original)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(core_db.Base.metadata.create_all)
    core_db.configure_engine(engine)
    yield engine
    core_db.configure_engine(None)
    await engine.dispose()


@pytest.fixture
def store(engine) -> RemoteStore:
    return RemoteStore(core_db.get_session_factory())


@pytest_asyncio.fixture
async def db_session(engine):
    async with core_db.get_session_factory()() as session:
        yield session


@pytest.fixture
def unconfigured_store():
    """No database configured: every store call raises StoreConfigurationError."""
    core_db.configure_engine(None)
    return RemoteStore(None)


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build a bearer header for a signed-in user."""
    def _headers(user_id: str = "user-1", email: str = "user@example.com") -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id, email=email)}"}
    return _headers
