"""Engine and sessions for the profiles database."""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings


def engine_connect_args(database_url: str) -> dict[str, Any]:
    """Driver arguments for ``database_url``.

    The Supabase pooler runs in transaction mode, which cannot hold
    asyncpg's prepared statements.
    """
    if "supabase.com" in database_url:
        return {"statement_cache_size": 0}
    return {}


engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    connect_args=engine_connect_args(settings.database_url),
)

# Profiles are read back after commit, so instances must not expire.
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for the readiness probe."""
    async with async_session_factory() as session:
        yield session
