"""
Persistence pool and per-request sessions.

One engine per process holds the connection pool. Requests borrow a
session through `get_db`; the lifespan closes the pool with `close_engine`.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from taxibook.app.core.config import settings


def engine_options(database_url: str) -> dict:
    """
    Keyword arguments for `create_async_engine` suited to the store behind
    `database_url`. SQLite has no server-side pool to size.
    """
    options = {"echo": settings.db_echo}
    if make_url(database_url).get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    """
    FastAPI dependency yielding one session per request.

    Work left uncommitted by a failing request is rolled back.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def close_engine() -> None:
    """Release every pooled connection."""
    await engine.dispose()
