"""Shared test fixtures for the location store.

Provides:
- A throwaway SQLite database file per test
- Async engines before and after running the migrations
- An ``AsyncSession`` bound to the migrated database
"""

from __future__ import annotations

import os

# Set test environment BEFORE any locstore imports so Settings() picks them up.
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from locstore.database import create_engine_for
from locstore.services.schema import upgrade_schema

# ---------------------------------------------------------------------------
# Database engines
# ---------------------------------------------------------------------------


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'locations.db'}"


@pytest.fixture
async def engine(database_url):
    """Engine on an empty database; nothing has been migrated yet."""
    eng = create_engine_for(database_url)
    yield eng
    await eng.dispose()


@pytest.fixture
async def migrated_engine(engine):
    await upgrade_schema(engine)
    return engine


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@pytest.fixture
async def db(migrated_engine):
    async with AsyncSession(migrated_engine, expire_on_commit=False) as session:
        yield session


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


async def create_location(db, *, source="gps-1", latitude=37.7749, longitude=-122.4194, **kwargs):
    """Insert a location and reload it so server defaults are populated."""
    from locstore.models import Location

    loc = Location(source=source, latitude=latitude, longitude=longitude, **kwargs)
    db.add(loc)
    await db.commit()
    await db.refresh(loc)
    return loc
