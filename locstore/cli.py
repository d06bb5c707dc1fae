"""Command-line entry point for the location store schema.

Commands:
- upgrade: apply migrations (default: head)
- downgrade: revert migrations (default: base)
- current: print the stamped revision
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from sqlalchemy.ext.asyncio import AsyncEngine

from locstore.config import APP_VERSION, settings
from locstore.core.logging_config import configure_logging
from locstore.core.metrics import app_info
from locstore.database import create_engine_for
from locstore.services.schema import current_revision, downgrade_schema, upgrade_schema

T = TypeVar("T")

app = typer.Typer(help="Location store schema migrations")

DATABASE_URL_HELP = "Database URL (defaults to DATABASE_URL)"


def _with_engine(database_url: Optional[str], action: Callable[[AsyncEngine], Awaitable[T]]) -> T:
    async def _main() -> T:
        engine = create_engine_for(database_url)
        try:
            return await action(engine)
        finally:
            await engine.dispose()

    return asyncio.run(_main())


@app.callback()
def main() -> None:
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    app_info.info({"version": APP_VERSION})


@app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    database_url: Optional[str] = typer.Option(None, "--database-url", help=DATABASE_URL_HELP),
):
    """Apply schema migrations."""
    _with_engine(database_url, lambda engine: upgrade_schema(engine, revision))
    typer.echo(f"Upgraded to {revision}")


@app.command()
def downgrade(
    revision: str = typer.Argument("base", help="Target revision"),
    database_url: Optional[str] = typer.Option(None, "--database-url", help=DATABASE_URL_HELP),
):
    """Revert schema migrations."""
    _with_engine(database_url, lambda engine: downgrade_schema(engine, revision))
    typer.echo(f"Downgraded to {revision}")


@app.command()
def current(
    database_url: Optional[str] = typer.Option(None, "--database-url", help=DATABASE_URL_HELP),
):
    """Show the revision the database is stamped with."""
    typer.echo(str(_with_engine(database_url, current_revision)))


if __name__ == "__main__":
    app()
