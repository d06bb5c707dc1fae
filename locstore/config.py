from __future__ import annotations

import os

APP_VERSION = "0.1.0"

_DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./locations.db"

# Plain scheme -> async driver scheme
_ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


def normalize_database_url(url: str) -> str:
    """Swap a driverless URL scheme for the async driver SQLAlchemy needs."""
    for plain, async_scheme in _ASYNC_DRIVERS.items():
        if url.startswith(plain):
            return async_scheme + url[len(plain):]
    return url


class Settings:
    PROJECT_NAME: str = "Location Store"

    DATABASE_URL: str = os.getenv("DATABASE_URL", _DEFAULT_DATABASE_URL)

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def database_url(self) -> str:
        return normalize_database_url(self.DATABASE_URL)


settings = Settings()
