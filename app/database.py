"""Database engine, session factory and request-scoped session dependency"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    pass


engine = create_async_engine(
    settings.database_url,
    echo=settings.api_debug,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """One session per request"""
    async with SessionLocal() as session:
        yield session


def get_session_factory() -> async_sessionmaker:
    """Session factory for handlers that fan out to several concurrent queries.

    An AsyncSession cannot run statements concurrently, so each branch of a
    fan-out opens its own session from this factory.
    """
    return SessionLocal
