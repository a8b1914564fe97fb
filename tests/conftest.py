"""Root conftest — async DB + FastAPI test client shared by every test package.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
      and foreign keys enforced
    - Requests run through the real get_db / DatabaseSessionManager path, so
      SQLAlchemy errors surface as DatabaseError exactly as in production
    - db_manager is restored after each test

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the test
      session and request sessions see the same database
    - Tables built with Base.metadata.create_all, not alembic (PostgreSQL-only
      details are not exercised here)
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import taskflow.infrastructure.database as db_module  # noqa: E402
import taskflow.models  # noqa: E402, F401
from taskflow.db.base import Base  # noqa: E402
from taskflow.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys,
)
from taskflow.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
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
async def http_client(test_engine):
    """httpx client bound to the FastAPI app, backed by the test engine."""
    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager.from_engine(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager
