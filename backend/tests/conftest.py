"""Pytest configuration and fixtures for ShoreAgents tests.

Both databases are replaced by one in-memory SQLite database; Redis
caching and rate limiting are switched off through settings.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("CACHE_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("JOB_DESCRIPTION_URL", "")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from shoreagents.database import Base, BpocBase, get_bpoc_db, get_db  # noqa: E402
from shoreagents.main import app  # noqa: E402
from shoreagents.models import BpocCandidate  # noqa: E402


# ── Test Database Setup ──────────────────────────────────────────

@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(BpocBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Test client with both database dependencies overridden."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def override_get_bpoc_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_bpoc_db] = override_get_bpoc_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ── Test Data Fixtures ───────────────────────────────────────────

CANDIDATE_ROWS = [
    {
        "user_id": "bpoc-1",
        "full_name": "maria santos",
        "position": "Software Developer",
        "overall_score": 88.0,
        "experience_years": 4,
        "key_skills": ["Python", "React"],
        "expected_salary": "PHP 60,000",
        "industry": "Technology",
        "work_setup": "work-from-home",
    },
    {
        "user_id": "bpoc-2",
        "full_name": "JOSE REYES",
        "position": "Senior Software Engineer",
        "overall_score": 92.0,
        "experience_years": 8,
        "key_skills": ["Java"],
        "expected_salary": "PHP 90,000",
        "industry": "Finance",
        "work_setup": "hybrid",
    },
    {
        "user_id": "bpoc-3",
        "full_name": "ana cruz",
        "position": "Accountant",
        "overall_score": 95.0,
        "experience_years": 1,
        "key_skills": ["Xero", "QuickBooks"],
        "expected_salary": "PHP 35,000",
        "industry": "Finance",
        "work_setup": "full-office",
    },
]


@pytest.fixture
def candidate_pool() -> list[dict]:
    return [dict(row) for row in CANDIDATE_ROWS]


@pytest_asyncio.fixture
async def bpoc_candidates(db_session: AsyncSession) -> list[BpocCandidate]:
    """Seed the BPOC candidate view."""
    candidates = [BpocCandidate(**row) for row in CANDIDATE_ROWS]
    db_session.add_all(candidates)
    await db_session.commit()
    return candidates


# ── Test Markers ─────────────────────────────────────────────────

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: API endpoint tests")
