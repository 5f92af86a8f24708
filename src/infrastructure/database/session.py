"""Database engine and session management."""

from typing import Any, AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings, settings


def engine_options(config: Settings) -> dict[str, Any]:
    """Keyword arguments for ``create_async_engine`` derived from settings.

    Pool sizing only applies to server databases. SQLite URLs get the
    dialect's default pool, which rejects the sizing arguments.
    """
    options: dict[str, Any] = {
        "echo": config.debug,
        "pool_pre_ping": True,
    }
    url = make_url(config.async_database_url)
    if url.get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=config.database_pool_size,
        max_overflow=config.database_max_overflow,
        pool_timeout=config.database_pool_timeout,
        pool_recycle=config.database_pool_recycle,
    )
    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {"server_settings": {"application_name": config.app_name}}
    return options


def build_engine(config: Settings) -> AsyncEngine:
    return create_async_engine(config.async_database_url, **engine_options(config))


engine = build_engine(settings)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that is closed once the request finishes."""
    async with async_session_factory() as session:
        yield session
