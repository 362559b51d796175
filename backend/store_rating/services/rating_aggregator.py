"""One-rating-per-(user, store) bookkeeping and the averages built on it."""
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.core.errors import InvalidInputError, NotFoundError
from store_rating.models.enums import MAX_RATING, MIN_RATING
from store_rating.models.rating import Rating
from store_rating.repos.rating_repo import RatingRepo
from store_rating.repos.store_repo import StoreRepo

log = logging.getLogger(__name__)

RATING_RANGE_MSG = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
NO_OWNED_STORE_MSG = "You do not own a store."
_CENTS = Decimal("0.01")


def round_average(value) -> float:
    """Round a raw AVG() result half-up to 2 decimals; None (no ratings) is 0."""
    if value is None:
        return 0.0
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


async def submit_rating(db: AsyncSession, user_id: int, store_id: int, value: int) -> Rating:
    if isinstance(value, bool) or not isinstance(value, int) or not (MIN_RATING <= value <= MAX_RATING):
        raise InvalidInputError(RATING_RANGE_MSG)
    if await StoreRepo(db).get(store_id) is None:
        raise NotFoundError("Store not found.")
    row = await RatingRepo(db).upsert(user_id=user_id, store_id=store_id, rating=value)
    log.debug("user %s rated store %s with %s", user_id, store_id, value)
    return row


async def average_for(db: AsyncSession, store_id: int) -> float:
    return round_average(await RatingRepo(db).average_for(store_id))


async def list_stores_for_user(
    db: AsyncSession,
    user_id: int,
    *,
    name: str | None = None,
    address: str | None = None,
) -> list[dict]:
    rows = await StoreRepo(db).list_for_rater(user_id, name=name, address=address)
    for r in rows:
        r["average_rating"] = round_average(r["average_rating"])
    return rows


async def owner_dashboard(db: AsyncSession, owner_id: int) -> dict:
    store = await StoreRepo(db).get_by_owner(owner_id)
    if store is None:
        raise NotFoundError(NO_OWNED_STORE_MSG)
    repo = RatingRepo(db)
    return {
        "storeName": store.name,
        "averageRating": round_average(await repo.average_for(store.id)),
        "raters": await repo.raters_for_store(store.id),
    }
