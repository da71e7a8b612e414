import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from catalog.core.config import settings

logger = logging.getLogger(__name__)

# Engine creation does not connect; the first checkout opens the pool.
engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
    echo=settings.debug,
    connect_args={
        "server_settings": {
            "statement_timeout": str(settings.db_statement_timeout_ms),
            "application_name": "brand-catalog",
        }
    },
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def dispose_engine() -> None:
    """Close pooled connections; called once on application shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
