from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.api.deps import CurrentUser, get_db, get_current_user
from store_rating.schemas.user import MessageOut, PasswordChangeRequest
from store_rating.services.accounts import change_password

router = APIRouter()


@router.put("/password", response_model=MessageOut)
async def update_password(
    payload: PasswordChangeRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    await change_password(db, user.id, payload.currentPassword, payload.newPassword)
    await db.commit()
    return {"msg": "Password updated successfully."}
