from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.api.access import require_admin
from store_rating.api.deps import get_db
from store_rating.models.enums import UserRole
from store_rating.repos.admin_dashboard_repo import AdminDashboardRepo
from store_rating.schemas.admin import AdminStoreCreate, AdminStoreRow, AdminUserCreate, AdminUserRow, StatsOut
from store_rating.schemas.auth import UserOut
from store_rating.schemas.store import StoreOut
from store_rating.services import directory

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=StatsOut)
async def stats(db: AsyncSession = Depends(get_db)):
    return await AdminDashboardRepo(db).stats()


@router.get("/users", response_model=list[AdminUserRow])
async def list_users(
    name: str | None = Query(default=None),
    email: str | None = Query(default=None),
    role: UserRole | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    return await directory.list_users(db, name=name, email=email, role=role.value if role else None)


@router.get("/stores", response_model=list[AdminStoreRow])
async def list_stores(
    name: str | None = Query(default=None),
    email: str | None = Query(default=None),
    address: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    return await directory.list_stores(db, name=name, email=email, address=address)


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: AdminUserCreate, db: AsyncSession = Depends(get_db)):
    user = await directory.create_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        address=payload.address,
        role=payload.role,
        store_id=payload.store_id,
    )
    await db.commit()
    return user


@router.post("/stores", response_model=StoreOut, status_code=status.HTTP_201_CREATED)
async def create_store(payload: AdminStoreCreate, db: AsyncSession = Depends(get_db)):
    store = await directory.create_store(
        db,
        name=payload.name,
        email=payload.email,
        address=payload.address,
        owner_id=payload.owner_id,
    )
    await db.commit()
    return store
