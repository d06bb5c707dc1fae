"""Unit tests for locstore.config: URL normalisation and defaults."""

from __future__ import annotations

import pytest

from locstore.config import _DEFAULT_DATABASE_URL, Settings, normalize_database_url


class TestNormalizeDatabaseUrl:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("sqlite:///./locations.db", "sqlite+aiosqlite:///./locations.db"),
            ("postgres://u:p@db/loc", "postgresql+asyncpg://u:p@db/loc"),
            ("postgresql://u:p@db/loc", "postgresql+asyncpg://u:p@db/loc"),
        ],
    )
    def test_plain_schemes_get_async_driver(self, url, expected):
        assert normalize_database_url(url) == expected

    def test_explicit_driver_untouched(self):
        url = "sqlite+aiosqlite:////var/lib/locations.db"
        assert normalize_database_url(url) == url

    def test_other_schemes_untouched(self):
        url = "mysql+aiomysql://u:p@db/loc"
        assert normalize_database_url(url) == url


class TestSettings:
    def test_database_url_property_normalises(self):
        s = Settings()
        s.DATABASE_URL = "sqlite:///data.db"
        assert s.database_url == "sqlite+aiosqlite:///data.db"

    def test_default_is_local_sqlite_file(self):
        assert _DEFAULT_DATABASE_URL == "sqlite+aiosqlite:///./locations.db"
