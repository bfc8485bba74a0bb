"""Database session management."""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """Pool settings for the configured backend.

    An in-memory SQLite database only exists on its one connection, so it is
    pinned to a single shared connection.
    """
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool}
    return {"pool_pre_ping": True}


engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    **_engine_options(settings.async_database_url),
)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for a single request."""
    async with async_session_factory() as session:
        yield session
