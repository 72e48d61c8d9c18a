"""Async database engine, session factory and request-scoped session dependency."""

import asyncio
import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from cms_admin.config import settings
from cms_admin.schema import ensure_schema

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.database_url, echo=settings.app_debug)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class SchemaGuard:
    """Runs the schema self-migration once per process, on first connection."""

    def __init__(self):
        self._lock = asyncio.Lock()
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    async def ensure(self, bind: AsyncEngine) -> list[str]:
        """Create missing tables and apply additive migrations if not done yet."""
        if self._ready:
            return []

        async with self._lock:
            if self._ready:
                return []
            async with bind.begin() as conn:
                applied = await ensure_schema(conn)
            self._ready = True
            logger.info("Database tables initialized successfully")
            return applied


schema_guard = SchemaGuard()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to one transaction; commit on success."""
    await schema_guard.ensure(engine)

    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
