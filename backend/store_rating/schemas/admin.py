from __future__ import annotations

from pydantic import BaseModel, field_validator

from store_rating.models.enums import UserRole
from store_rating.schemas.auth import RegisterRequest
from store_rating.schemas.validators import check_address, check_email, check_name

STORE_NAME_MSG = "Store name must be between 1 and 60 characters."


class AdminUserCreate(RegisterRequest):
    role: UserRole = UserRole.normal_user
    # Only honoured when role is Store Owner.
    store_id: int | None = None


class AdminStoreCreate(BaseModel):
    name: str
    email: str
    address: str | None = None
    owner_id: int | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return check_name(v, min_len=1, msg=STORE_NAME_MSG)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return check_email(v)

    @field_validator("address")
    @classmethod
    def _address(cls, v: str | None) -> str | None:
        return check_address(v)


class StatsOut(BaseModel):
    users: int
    stores: int
    ratings: int


class AdminUserRow(BaseModel):
    id: int
    name: str
    email: str
    address: str | None = None
    role: UserRole
    store_name: str | None = None
    store_rating: float = 0


class AdminStoreRow(BaseModel):
    id: int
    name: str
    email: str
    address: str | None = None
    owner_id: int | None = None
    owner_name: str | None = None
    average_rating: float = 0
