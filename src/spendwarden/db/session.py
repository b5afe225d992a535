from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from spendwarden.config import settings


def engine_options(database_url: str, timeout: float) -> dict[str, Any]:
    """Driver and pool options bounding how long a store call may wait."""
    if database_url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"timeout": timeout}}
        if ":memory:" in database_url:
            # A single shared connection, otherwise every checkout sees an empty database.
            options["connect_args"]["check_same_thread"] = False
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_timeout": timeout,
        "pool_pre_ping": True,
        "connect_args": {"timeout": timeout, "command_timeout": timeout},
    }


# Do not log SQL statement parameters outside development (payees and amounts).
async_engine = create_async_engine(
    settings.database_url,
    echo=(settings.db_echo if settings.app_env.lower() == "development" else False),
    **engine_options(settings.database_url, settings.db_timeout_seconds),
)

AsyncSessionLocal = async_sessionmaker(
    async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
