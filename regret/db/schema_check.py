from __future__ import annotations

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine


def head_revision(alembic_ini_path: str = "alembic.ini") -> str | None:
    return ScriptDirectory.from_config(Config(alembic_ini_path)).get_current_head()


async def current_revision(engine: AsyncEngine) -> str | None:
    """Revision stamped in the database, or None when Alembic never ran there."""

    def _read(sync_conn) -> str | None:
        if not inspect(sync_conn).has_table("alembic_version"):
            return None
        return MigrationContext.configure(sync_conn).get_current_revision()

    async with engine.connect() as conn:
        return await conn.run_sync(_read)


async def ensure_schema_up_to_date(engine: AsyncEngine, alembic_ini_path: str = "alembic.ini") -> None:
    """Stage/prod startup gate: the database must be migrated to Alembic head."""
    current = await current_revision(engine)
    if current is None:
        raise RuntimeError(
            "Database schema is not initialized via Alembic (missing alembic_version). "
            "Run: alembic upgrade head"
        )

    head = head_revision(alembic_ini_path)
    if current != head:
        raise RuntimeError(
            f"Database schema is out of date: current={current}, head={head}. "
            "Run: alembic upgrade head"
        )
