from __future__ import annotations

from fastapi import APIRouter

from store_rating.api.routes import health, auth, stores, ratings, users, admin

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(stores.router, prefix="/stores", tags=["stores"])
router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
