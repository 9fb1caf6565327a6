"""FastAPI dependencies."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.database import session_scope


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield a database session scoped to one request."""
    async with session_scope() as session:
        yield session
