from __future__ import annotations

import pytest

from store_rating.core.errors import ConflictError
from store_rating.core.security import hash_password
from store_rating.repos.rating_repo import RatingRepo
from store_rating.repos.store_repo import DUPLICATE_STORE_MSG, OWNER_HAS_STORE_MSG, StoreRepo
from store_rating.repos.user_repo import UserRepo


async def _user(db, email: str):
    return await UserRepo(db).create(
        name="Repository Level User", email=email, password_hash=hash_password("Secret@123")
    )


async def test_duplicate_email_is_a_conflict_even_without_precheck(db):
    await _user(db, "same@example.com")
    with pytest.raises(ConflictError):
        await _user(db, "same@example.com")


async def test_second_store_for_same_owner_is_a_conflict(db):
    owner = await _user(db, "owner@example.com")
    stores = StoreRepo(db)
    await stores.create(name="First", email="first@example.com", owner_id=owner.id)
    with pytest.raises(ConflictError) as exc:
        await stores.create(name="Second", email="second@example.com", owner_id=owner.id)
    assert exc.value.msg == OWNER_HAS_STORE_MSG


async def test_upsert_overwrites_and_refreshes_timestamp(db):
    user = await _user(db, "rater@example.com")
    store = await StoreRepo(db).create(name="Shop", email="shop@example.com")
    repo = RatingRepo(db)

    first = await repo.upsert(user.id, store.id, 2)
    first_id, first_at = first.id, first.created_at
    second = await repo.upsert(user.id, store.id, 5)

    assert second.id == first_id
    assert second.rating == 5
    assert second.created_at >= first_at
    assert (await repo.get(user.id, store.id)).rating == 5
    assert await repo.count() == 1


async def test_duplicate_store_email_keeps_its_own_message(db):
    stores = StoreRepo(db)
    await stores.create(name="First", email="shop@example.com")
    with pytest.raises(ConflictError) as exc:
        await stores.create(name="Second", email="shop@example.com")
    assert exc.value.msg == DUPLICATE_STORE_MSG
