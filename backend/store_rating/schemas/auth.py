from __future__ import annotations

from pydantic import BaseModel, field_validator

from store_rating.models.enums import UserRole
from store_rating.schemas.validators import check_address, check_email, check_name, check_password


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    address: str | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return check_name(v)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return check_email(v)

    @field_validator("password")
    @classmethod
    def _password(cls, v: str) -> str:
        return check_password(v)

    @field_validator("address")
    @classmethod
    def _address(cls, v: str | None) -> str | None:
        return check_address(v)


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        # Lookups match the lower-cased form stored at registration.
        return (v or "").strip().lower()


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole

    class Config:
        from_attributes = True


class SessionUser(BaseModel):
    id: int
    name: str
    role: UserRole

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    msg: str
    user: UserOut


class LoginResponse(BaseModel):
    msg: str
    token: str
    user: SessionUser
