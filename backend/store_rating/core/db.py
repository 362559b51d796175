from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from store_rating.core.config import settings


def build_engine(url: str) -> AsyncEngine:
    if url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url):
        # In-memory SQLite lives per connection; share one across the pool.
        return create_async_engine(url, poolclass=StaticPool, connect_args={"check_same_thread": False})
    return create_async_engine(url, pool_pre_ping=True)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL)

AsyncSessionMaker = build_sessionmaker(engine)


async def get_session() -> AsyncSession:
    async with AsyncSessionMaker() as session:
        yield session
