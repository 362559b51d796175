from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.repos.rating_repo import RatingRepo
from store_rating.repos.store_repo import StoreRepo
from store_rating.repos.user_repo import UserRepo


class AdminDashboardRepo:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def stats(self) -> dict:
        return {
            "users": await UserRepo(self.db).count(),
            "stores": await StoreRepo(self.db).count(),
            "ratings": await RatingRepo(self.db).count(),
        }
