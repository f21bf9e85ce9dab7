"""Database engines, session factories, and base classes.

Two databases, two DeclarativeBase classes:
  - Base      → ShoreAgents tables (pricing quotes), read/write
  - BpocBase  → BPOC recruiting views (candidates), read-only

Two session dependencies for FastAPI:
  - get_db()       → ShoreAgents database
  - get_bpoc_db()  → BPOC database
"""

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.orm import DeclarativeBase

from shoreagents.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_size=10,
    max_overflow=5,
)

bpoc_engine = create_async_engine(
    settings.bpoc_database_url,
    echo=settings.debug,
    pool_size=10,
    pool_recycle=30,
)

async_session = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

bpoc_session = async_sessionmaker(
    bpoc_engine, class_=AsyncSession, expire_on_commit=False
)


# ── Base classes ────────────────────────────────────────────

class Base(DeclarativeBase):
    """Models owned by the ShoreAgents database."""
    pass


class BpocBase(DeclarativeBase):
    """Read-only mappings onto the BPOC database."""
    pass


# ── Session dependencies ────────────────────────────────────

async def get_db() -> AsyncSession:
    """Yield a session on the ShoreAgents database."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_bpoc_db() -> AsyncSession:
    """Yield a session on the BPOC database.

    Nothing is written through this session, so it is never committed.
    """
    async with bpoc_session() as session:
        yield session
