from __future__ import annotations

from pydantic import BaseModel, field_validator

from store_rating.schemas.validators import check_password


class PasswordChangeRequest(BaseModel):
    currentPassword: str
    newPassword: str

    @field_validator("newPassword")
    @classmethod
    def _new_password(cls, v: str) -> str:
        return check_password(v)


class MessageOut(BaseModel):
    msg: str
