from __future__ import annotations

from sqlalchemy import select, func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.core.errors import ConflictError
from store_rating.models.enums import UserRole
from store_rating.models.rating import Rating
from store_rating.models.store import Store
from store_rating.models.user import User
from store_rating.repos.filters import contains

DUPLICATE_USER_MSG = "User with this email already exists."


class UserRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> User | None:
        res = await self.session.execute(select(User).where(User.email == email))
        return res.scalar_one_or_none()

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        address: str | None = None,
        role: str = UserRole.normal_user.value,
    ) -> User:
        user = User(name=name, email=email, password_hash=password_hash, address=address, role=role)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            # Lost a race against a concurrent registration with the same email.
            raise ConflictError(DUPLICATE_USER_MSG)
        return user

    async def get(self, user_id: int) -> User | None:
        res = await self.session.execute(select(User).where(User.id == user_id))
        return res.scalar_one_or_none()

    async def count(self) -> int:
        res = await self.session.execute(select(func.count(User.id)))
        return int(res.scalar_one() or 0)

    async def set_role(self, user_id: int, role: str) -> None:
        await self.session.execute(update(User).where(User.id == user_id).values(role=role))

    async def set_password_hash(self, user_id: int, password_hash: str) -> None:
        await self.session.execute(update(User).where(User.id == user_id).values(password_hash=password_hash))

    async def list_with_stores(
        self,
        name: str | None = None,
        email: str | None = None,
        role: str | None = None,
    ) -> list[dict]:
        """Users enriched with their owned store's name and raw average rating."""
        q = (
            select(
                User.id,
                User.name,
                User.email,
                User.address,
                User.role,
                Store.name.label("store_name"),
                func.avg(Rating.rating).label("store_rating"),
            )
            .select_from(User)
            .outerjoin(Store, Store.owner_id == User.id)
            .outerjoin(Rating, Rating.store_id == Store.id)
        )
        if name:
            q = q.where(contains(User.name, name))
        if email:
            q = q.where(contains(User.email, email))
        if role:
            q = q.where(User.role == role)
        q = q.group_by(User.id, User.name, User.email, User.address, User.role, Store.name).order_by(User.name, User.id)
        res = await self.session.execute(q)
        return [dict(r._mapping) for r in res.all()]
