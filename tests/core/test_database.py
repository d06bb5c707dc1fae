"""Unit tests for locstore.database."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from locstore.database import create_engine_for, get_db


class TestCreateEngineFor:
    async def test_plain_sqlite_url_uses_aiosqlite(self, tmp_path):
        engine = create_engine_for(f"sqlite:///{tmp_path / 'a.db'}")
        try:
            assert engine.url.drivername == "sqlite+aiosqlite"
        finally:
            await engine.dispose()

    async def test_engine_connects(self, engine):
        async with engine.connect() as conn:
            assert conn.dialect.name == "sqlite"


class TestGetDb:
    async def test_yields_async_session(self):
        gen = get_db()
        session = await gen.__anext__()
        try:
            assert isinstance(session, AsyncSession)
        finally:
            await gen.aclose()
