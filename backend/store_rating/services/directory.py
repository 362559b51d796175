"""Administrator-side user and store management."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.core.errors import ConflictError, NotFoundError
from store_rating.models.enums import UserRole
from store_rating.models.store import Store
from store_rating.models.user import User
from store_rating.repos.store_repo import DUPLICATE_STORE_MSG, OWNER_HAS_STORE_MSG, StoreRepo
from store_rating.repos.user_repo import UserRepo
from store_rating.services.accounts import create_account
from store_rating.services.rating_aggregator import round_average

log = logging.getLogger(__name__)

STORE_HAS_OWNER_MSG = "This store already has an owner."


async def list_users(
    db: AsyncSession,
    *,
    name: str | None = None,
    email: str | None = None,
    role: str | None = None,
) -> list[dict]:
    rows = await UserRepo(db).list_with_stores(name=name, email=email, role=role)
    for r in rows:
        r["store_rating"] = round_average(r["store_rating"])
    return rows


async def list_stores(
    db: AsyncSession,
    *,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
) -> list[dict]:
    rows = await StoreRepo(db).list_with_owners(name=name, email=email, address=address)
    for r in rows:
        r["average_rating"] = round_average(r["average_rating"])
    return rows


async def create_user(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    address: str | None,
    role: UserRole,
    store_id: int | None = None,
) -> User:
    """Create a user; a Store Owner may be handed an existing store in the same transaction."""
    stores = StoreRepo(db)
    store = None
    if role is UserRole.store_owner and store_id is not None:
        store = await stores.get(store_id)
        if store is None:
            raise NotFoundError("Store not found.")
        if store.owner_id is not None:
            raise ConflictError(STORE_HAS_OWNER_MSG)

    user = await create_account(db, name=name, email=email, password=password, address=address, role=role)
    if store is not None:
        await stores.assign_owner(store.id, user.id)
        log.info("admin: assigned store %s to new owner %s", store.id, user.id)
    log.info("admin: created user %s with role %r", user.id, role.value)
    return user


async def create_store(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    address: str | None,
    owner_id: int | None = None,
) -> Store:
    """Create a store; naming an owner promotes them to Store Owner in the same transaction."""
    stores = StoreRepo(db)
    users = UserRepo(db)
    if await stores.get_by_email(email):
        raise ConflictError(DUPLICATE_STORE_MSG)
    if owner_id is not None:
        if await users.get(owner_id) is None:
            raise NotFoundError("Owner not found.")
        if await stores.get_by_owner(owner_id) is not None:
            raise ConflictError(OWNER_HAS_STORE_MSG)

    store = await stores.create(name=name, email=email, address=address, owner_id=owner_id)
    if owner_id is not None:
        await users.set_role(owner_id, UserRole.store_owner.value)
        log.info("admin: promoted user %s to %r", owner_id, UserRole.store_owner.value)
    log.info("admin: created store %s", store.id)
    return store
