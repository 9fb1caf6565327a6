"""Async database engine and session management.

One engine and session factory per process, created by ``init_engine`` at
startup (API lifespan or CLI command) and torn down by ``dispose_engine``.
PostgreSQL runs through asyncpg; SQLite through aiosqlite for local
development and tests.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the current async engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the current session factory.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        msg = "Session factory not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _session_factory


def init_engine(database_url: str, *, schema: str | None = None, **kwargs: object) -> AsyncEngine:
    """Create and store the async engine and session factory.

    Args:
        database_url: Async SQLAlchemy connection string.
        schema: PostgreSQL schema placed first on the connection's
            ``search_path``. Ignored for SQLite.
        **kwargs: Additional arguments passed to create_async_engine.

    Returns:
        The created async engine.
    """
    global _engine, _session_factory  # noqa: PLW0603
    url = make_url(database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    if is_sqlite:
        if schema is not None:
            logger.warning(f"Ignoring database schema '{schema}' for SQLite")
        # Every connection to ":memory:" is a separate database
        if url.database in (None, "", ":memory:"):
            kwargs.setdefault("poolclass", StaticPool)
    else:
        if schema is not None:
            connect_args = kwargs.pop("connect_args", {})
            if not isinstance(connect_args, dict):
                msg = "connect_args must be a dict"
                raise TypeError(msg)
            connect_args["server_settings"] = {"search_path": f"{schema},public"}
            kwargs["connect_args"] = connect_args
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 5)

    _engine = create_async_engine(database_url, **kwargs)
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    logger.debug(f"Database engine initialized for {url.render_as_string(hide_password=True)}")
    return _engine


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession]:
    """Open a session from the current factory and close it on exit."""
    async with get_session_factory()() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose of the async engine and release connections."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
