"""Schema self-migration.

Tables are created if missing, then additive migrations bring tables that
predate a column up to date:

- ``position`` on the positioned collections, backfilled ``0..N-1`` by
  ascending ID.
- ``gif`` on ``banners``.

Every ALTER is preceded by a column check, so running this against an
already-migrated schema changes nothing. A failing table is logged and
skipped; the remaining tables are still migrated.
"""

import logging

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from cms_admin.models import Base

logger = logging.getLogger(__name__)

POSITIONED_TABLES = ("faqs", "reviews", "classes", "gallery_images")


async def _column_names(conn: AsyncConnection, table: str) -> set[str]:
    return await conn.run_sync(
        lambda sync_conn: {col["name"] for col in inspect(sync_conn).get_columns(table)}
    )


async def add_position_column(conn: AsyncConnection, table: str) -> bool:
    """Add and backfill ``position`` if the table lacks it. Returns True if applied."""
    if "position" in await _column_names(conn, table):
        return False

    logger.info(f"Adding position column to {table} table")
    await conn.execute(text(f"ALTER TABLE {table} ADD COLUMN position INTEGER DEFAULT 0"))

    result = await conn.execute(text(f"SELECT id FROM {table} ORDER BY id ASC"))
    for index, row_id in enumerate(result.scalars().all()):
        await conn.execute(
            text(f"UPDATE {table} SET position = :position WHERE id = :id"),
            {"position": index, "id": row_id},
        )
    return True


async def add_banner_gif_column(conn: AsyncConnection) -> bool:
    """Add the nullable ``gif`` column to banners. Returns True if applied."""
    if "gif" in await _column_names(conn, "banners"):
        return False

    logger.info("Adding gif column to banners table")
    await conn.execute(text("ALTER TABLE banners ADD COLUMN gif TEXT"))
    return True


async def ensure_schema(conn: AsyncConnection) -> list[str]:
    """Create missing tables and apply pending migrations.

    Returns the names of the migrations that were applied, e.g.
    ``["faqs.position", "banners.gif"]``.
    """
    await conn.run_sync(Base.metadata.create_all)

    steps = [(f"{table}.position", add_position_column, (table,)) for table in POSITIONED_TABLES]
    steps.append(("banners.gif", add_banner_gif_column, ()))

    applied: list[str] = []
    for name, migrate, args in steps:
        try:
            async with conn.begin_nested():
                if await migrate(conn, *args):
                    applied.append(name)
        except SQLAlchemyError as e:
            logger.warning(f"Migration {name} skipped or failed: {e}")

    if applied:
        logger.info(f"Applied schema migrations: {', '.join(applied)}")
    return applied
