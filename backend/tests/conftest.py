"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The API client talks to the app through ASGITransport (lifespan not run);
      app.state.db_manager is pointed at the test engine for the test's duration

Design Decisions:
    - SQLite in-memory with StaticPool: every session sees the same database
    - Settings env defaults applied before the app module is imported
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from learning_tracker.db.base import Base  # noqa: E402
from learning_tracker.infrastructure.database import DatabaseSessionManager  # noqa: E402
from learning_tracker.main import app  # noqa: E402
import learning_tracker.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine):
    """FastAPI test client backed by the test engine."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = DatabaseSessionManager.from_engine(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager
