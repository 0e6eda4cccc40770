"""Database session dependency."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request; services open and finish their own transactions."""
    session_factory = request.app.state.container.session_factory
    async with session_factory() as session:
        yield session
