from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.api.deps import CurrentUser, get_db, get_current_user
from store_rating.schemas.rating import RatingOut, RatingRequest
from store_rating.services.rating_aggregator import submit_rating

router = APIRouter()


@router.post("", response_model=RatingOut)
async def rate_store(payload: RatingRequest, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    row = await submit_rating(db, user.id, payload.store_id, payload.rating)
    await db.commit()
    return row
