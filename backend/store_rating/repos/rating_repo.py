from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select, func, desc
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.models.rating import Rating
from store_rating.models.user import User

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RatingRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int, store_id: int) -> Rating | None:
        res = await self.session.execute(
            select(Rating).where(Rating.user_id == user_id, Rating.store_id == store_id)
        )
        return res.scalar_one_or_none()

    async def upsert(self, user_id: int, store_id: int, rating: int) -> Rating:
        """Insert or overwrite the single (user, store) rating in one statement.

        Re-rating replaces the value and refreshes ``created_at``.
        """
        dialect = self.session.get_bind().dialect.name
        make_insert = _DIALECT_INSERTS.get(dialect)
        if make_insert is None:
            raise RuntimeError(f"Rating upsert is not supported on dialect {dialect!r}")

        now = datetime.now(timezone.utc)
        stmt = make_insert(Rating).values(user_id=user_id, store_id=store_id, rating=rating, created_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "store_id"],
            set_={"rating": stmt.excluded.rating, "created_at": stmt.excluded.created_at},
        )
        res = await self.session.execute(
            stmt.returning(Rating),
            execution_options={"populate_existing": True},
        )
        return res.scalar_one()

    async def average_for(self, store_id: int):
        """Raw mean of the store's ratings, or None when it has none."""
        res = await self.session.execute(select(func.avg(Rating.rating)).where(Rating.store_id == store_id))
        return res.scalar_one_or_none()

    async def raters_for_store(self, store_id: int) -> list[dict]:
        res = await self.session.execute(
            select(User.name, User.email, Rating.rating)
            .join(User, User.id == Rating.user_id)
            .where(Rating.store_id == store_id)
            .order_by(desc(Rating.created_at), desc(Rating.id))
        )
        return [dict(r._mapping) for r in res.all()]

    async def count(self) -> int:
        res = await self.session.execute(select(func.count(Rating.id)))
        return int(res.scalar_one() or 0)
