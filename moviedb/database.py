from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from typing import AsyncGenerator
import logging

from .config import settings

logger = logging.getLogger(__name__)

# ============================================================
# Async Database Engine
# ============================================================

def normalize_database_url(url: str) -> str:
    """
    Rewrite sync driver URLs to their async counterparts.

    postgresql:// and postgresql+psycopg2:// become postgresql+asyncpg://,
    sqlite:// becomes sqlite+aiosqlite://. Async URLs pass through unchanged.
    """
    if url.startswith("sqlite+aiosqlite://") or url.startswith("postgresql+asyncpg://"):
        return url

    return url.replace(
        'postgresql+psycopg2://',
        'postgresql+asyncpg://'
    ).replace(
        'postgresql://',
        'postgresql+asyncpg://'
    ).replace(
        'sqlite://',
        'sqlite+aiosqlite://'
    )


def engine_options(url: str) -> dict:
    """Pool options for the engine; SQLite engines manage their own pool."""
    options = {"echo": settings.DB_ECHO, "future": True}
    if url.startswith("sqlite"):
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
    )
    return options


ASYNC_DATABASE_URL = normalize_database_url(settings.DATABASE_URL)

async_engine = create_async_engine(ASYNC_DATABASE_URL, **engine_options(ASYNC_DATABASE_URL))

# Async session factory
AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,
)

# ============================================================
# Base Model
# ============================================================

Base = declarative_base()

# ============================================================
# Database Session Dependency
# ============================================================

async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Async database session dependency for FastAPI endpoints.

    One session per request; each service operation commits its own write.
    The session is closed after the response is sent.
    """
    session = AsyncSessionLocal()
    try:
        yield session
    finally:
        await session.close()


# ============================================================
# Database Health Check
# ============================================================

async def check_db_health() -> bool:
    """
    Check if database is accessible and responsive.
    Returns True if healthy, False otherwise.
    """
    session = AsyncSessionLocal()
    try:
        await session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
    finally:
        await session.close()


# ============================================================
# Startup/Shutdown Handlers
# ============================================================

async def init_db():
    try:
        logger.info("🔄 Creating database tables...")

        # Register models with Base.metadata before create_all
        from . import models  # noqa: F401

        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        is_healthy = await check_db_health()
        if is_healthy:
            logger.info("✅ Database health check passed")
        else:
            logger.error("❌ Database health check failed")

    except Exception as e:
        logger.error(f"❌ Database init failed: {e}", exc_info=True)
        raise


async def close_db():
    """
    Close database connections on shutdown.
    """
    try:
        logger.info("🔄 Closing database connections...")
        await async_engine.dispose()
        logger.info("✅ Database connections closed")
    except Exception as e:
        logger.error(f"❌ Error closing database: {e}")


__all__ = [
    'Base',
    'async_engine',
    'AsyncSessionLocal',
    'get_async_db',
    'check_db_health',
    'init_db',
    'close_db',
]
