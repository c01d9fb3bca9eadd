"""SQLAlchemy async database setup."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tinyblog.config import DatabaseConfig, get_settings


def build_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create an async engine from an explicit database config."""
    engine_kwargs: dict = {}
    if config.pool_size is not None:
        engine_kwargs["pool_size"] = config.pool_size
    if config.max_overflow is not None:
        engine_kwargs["max_overflow"] = config.max_overflow

    return create_async_engine(config.url, echo=config.echo, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the given engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = build_engine(get_settings().database_config)

# Session factory
async_session_factory = build_session_factory(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI to get database session."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
