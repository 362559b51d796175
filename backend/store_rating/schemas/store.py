from __future__ import annotations

from pydantic import BaseModel


class StoreListItem(BaseModel):
    id: int
    name: str
    address: str | None = None
    average_rating: float
    user_rating: int | None = None


class RaterOut(BaseModel):
    name: str
    email: str
    rating: int


class OwnerDashboardOut(BaseModel):
    storeName: str
    averageRating: float
    raters: list[RaterOut]


class StoreOut(BaseModel):
    id: int
    name: str
    email: str
    address: str | None = None
    owner_id: int | None = None

    class Config:
        from_attributes = True
