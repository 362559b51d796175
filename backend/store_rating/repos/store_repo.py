from __future__ import annotations

from sqlalchemy import select, func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from store_rating.core.errors import ConflictError
from store_rating.models.rating import Rating
from store_rating.models.store import Store
from store_rating.models.user import User
from store_rating.repos.filters import contains

DUPLICATE_STORE_MSG = "Store with this email already exists."
OWNER_HAS_STORE_MSG = "This user already owns a store."


class StoreRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, store_id: int) -> Store | None:
        res = await self.session.execute(select(Store).where(Store.id == store_id))
        return res.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Store | None:
        res = await self.session.execute(select(Store).where(Store.email == email))
        return res.scalar_one_or_none()

    async def get_by_owner(self, owner_id: int) -> Store | None:
        res = await self.session.execute(select(Store).where(Store.owner_id == owner_id))
        return res.scalar_one_or_none()

    async def create(self, name: str, email: str, address: str | None = None, owner_id: int | None = None) -> Store:
        store = Store(name=name, email=email, address=address, owner_id=owner_id)
        self.session.add(store)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Two unique columns can trip here: email and owner_id.
            if "owner_id" in str(e.orig):
                raise ConflictError(OWNER_HAS_STORE_MSG)
            raise ConflictError(DUPLICATE_STORE_MSG)
        return store

    async def assign_owner(self, store_id: int, owner_id: int) -> None:
        await self.session.execute(update(Store).where(Store.id == store_id).values(owner_id=owner_id))

    async def count(self) -> int:
        res = await self.session.execute(select(func.count(Store.id)))
        return int(res.scalar_one() or 0)

    async def list_for_rater(
        self,
        user_id: int,
        name: str | None = None,
        address: str | None = None,
    ) -> list[dict]:
        """All stores with the raw average rating and ``user_id``'s own rating."""
        mine = aliased(Rating)
        user_rating = (
            select(mine.rating)
            .where(mine.user_id == user_id, mine.store_id == Store.id)
            .correlate(Store)
            .scalar_subquery()
        )
        q = (
            select(
                Store.id,
                Store.name,
                Store.address,
                func.avg(Rating.rating).label("average_rating"),
                user_rating.label("user_rating"),
            )
            .select_from(Store)
            .outerjoin(Rating, Rating.store_id == Store.id)
        )
        if name:
            q = q.where(contains(Store.name, name))
        if address:
            q = q.where(contains(Store.address, address))
        q = q.group_by(Store.id, Store.name, Store.address).order_by(Store.name, Store.id)
        res = await self.session.execute(q)
        return [dict(r._mapping) for r in res.all()]

    async def list_with_owners(
        self,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
    ) -> list[dict]:
        q = (
            select(
                Store.id,
                Store.name,
                Store.email,
                Store.address,
                Store.owner_id,
                User.name.label("owner_name"),
                func.avg(Rating.rating).label("average_rating"),
            )
            .select_from(Store)
            .outerjoin(Rating, Rating.store_id == Store.id)
            .outerjoin(User, User.id == Store.owner_id)
        )
        if name:
            q = q.where(contains(Store.name, name))
        if email:
            q = q.where(contains(Store.email, email))
        if address:
            q = q.where(contains(Store.address, address))
        q = q.group_by(Store.id, Store.name, Store.email, Store.address, Store.owner_id, User.name).order_by(Store.name, Store.id)
        res = await self.session.execute(q)
        return [dict(r._mapping) for r in res.all()]
