"""Schema runner: applies, reverts and reports Alembic revisions.

Migrations run on a connection borrowed from the caller's async engine, so
host applications can call :func:`upgrade_schema` from their own startup
without Alembic opening a second engine or event loop.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from locstore.core.metrics import schema_migration_duration_seconds, schema_migrations_total

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parents[1] / "migrations"


def alembic_config(database_url: str | None = None) -> Config:
    """Alembic config for the packaged migration scripts, without an ini file."""
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    if database_url:
        # ConfigParser interpolation treats % specially
        cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def _run_upgrade(sync_conn: Connection, cfg: Config, revision: str) -> None:
    inspector = sa_inspect(sync_conn)
    if inspector.has_table("locations") and not inspector.has_table("alembic_version"):
        logger.info("Unversioned locations table found; it will be kept as-is")
    cfg.attributes["connection"] = sync_conn
    command.upgrade(cfg, revision)


def _run_downgrade(sync_conn: Connection, cfg: Config, revision: str) -> None:
    cfg.attributes["connection"] = sync_conn
    command.downgrade(cfg, revision)


def _read_revision(sync_conn: Connection) -> str | None:
    return MigrationContext.configure(sync_conn).get_current_revision()


async def _migrate(
    engine: AsyncEngine,
    direction: str,
    revision: str,
    step: Callable[[Connection, Config, str], None],
) -> None:
    database = engine.url.render_as_string(hide_password=True)
    extra = {"direction": direction, "revision": revision, "database": database}
    logger.info("Schema %s to %s on %s", direction, revision, database, extra=extra)

    started = time.perf_counter()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(step, alembic_config(), revision)
    except Exception:
        schema_migrations_total.labels(direction=direction, status="error").inc()
        logger.exception("Schema %s to %s failed", direction, revision, extra=extra)
        raise
    finally:
        schema_migration_duration_seconds.labels(direction=direction).observe(
            time.perf_counter() - started
        )

    schema_migrations_total.labels(direction=direction, status="success").inc()
    logger.info("Schema %s to %s complete", direction, revision, extra=extra)


async def upgrade_schema(engine: AsyncEngine, revision: str = "head") -> None:
    """Apply migrations up to ``revision``. Already-applied revisions are skipped."""
    await _migrate(engine, "upgrade", revision, _run_upgrade)


async def downgrade_schema(engine: AsyncEngine, revision: str = "base") -> None:
    await _migrate(engine, "downgrade", revision, _run_downgrade)


async def current_revision(engine: AsyncEngine) -> str | None:
    """Revision stamped in ``alembic_version``, or None for an unversioned database."""
    async with engine.connect() as conn:
        return await conn.run_sync(_read_revision)
