"""Engine construction and per-request sessions."""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


@dataclass
class DatabaseConnection:
    """Outcome of :func:`connect_database`.

    Either ``engine`` and ``sessionmaker`` are set, or ``error`` describes
    why the database could not be reached.
    """

    engine: AsyncEngine | None = None
    sessionmaker: async_sessionmaker[AsyncSession] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def connect_database(url: str, echo: bool = False) -> DatabaseConnection:
    """Open an engine for ``url`` and create the ``books`` table if missing.

    Driver, URL and connection problems are reported in the returned
    ``DatabaseConnection`` instead of being raised; the caller decides
    whether to abort.
    """
    import bookstore.models  # noqa: F401

    engine = None
    try:
        engine = create_async_engine(url, echo=echo)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, ImportError, OSError) as e:
        if engine is not None:
            await engine.dispose()
        logger.error("Failed to connect to database %s: %s", url, e)
        return DatabaseConnection(error=f"{type(e).__name__}: {e}")

    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return DatabaseConnection(
        engine=engine,
        sessionmaker=async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.sessionmaker() as session:
        yield session
