from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from locstore.config import normalize_database_url, settings


def create_engine_for(database_url: str | None = None) -> AsyncEngine:
    """Build an async engine; pool sizing only applies to server databases."""
    url = normalize_database_url(database_url or settings.database_url)
    kwargs: dict = {"echo": False, "future": True}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=5,
            max_overflow=5,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True,
        )
    return create_async_engine(url, **kwargs)


engine = create_engine_for()
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncSession:  # type: ignore[misc]
    async with async_session() as session:
        yield session
