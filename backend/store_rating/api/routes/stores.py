from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.api.deps import CurrentUser, get_db, get_current_user
from store_rating.schemas.store import OwnerDashboardOut, StoreListItem
from store_rating.services.rating_aggregator import list_stores_for_user, owner_dashboard

router = APIRouter()


@router.get("", response_model=list[StoreListItem])
async def list_stores(
    name: str | None = Query(default=None),
    address: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await list_stores_for_user(db, user.id, name=name, address=address)


@router.get("/owner-dashboard", response_model=OwnerDashboardOut)
async def get_owner_dashboard(db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    # Scoped by ownership rather than the token's role, so a freshly promoted
    # owner sees the store before logging in again.
    return await owner_dashboard(db, user.id)
