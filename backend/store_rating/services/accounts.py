from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from store_rating.core.security import create_session_token, hash_password, verify_password
from store_rating.models.enums import UserRole
from store_rating.models.user import User
from store_rating.repos.user_repo import DUPLICATE_USER_MSG, UserRepo

log = logging.getLogger(__name__)

# Same message for unknown email and wrong password.
INVALID_LOGIN_MSG = "Invalid credentials."
WRONG_CURRENT_PASSWORD_MSG = "Incorrect current password."


async def create_account(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    address: str | None,
    role: UserRole = UserRole.normal_user,
) -> User:
    repo = UserRepo(db)
    if await repo.get_by_email(email):
        raise ConflictError(DUPLICATE_USER_MSG)
    return await repo.create(
        name=name,
        email=email,
        password_hash=hash_password(password),
        address=address,
        role=role.value,
    )


async def authenticate_credentials(db: AsyncSession, email: str, password: str) -> tuple[User, str]:
    user = await UserRepo(db).get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError(INVALID_LOGIN_MSG)
    return user, create_session_token(user.id, user.name, user.role)


async def change_password(db: AsyncSession, user_id: int, current_password: str, new_password: str) -> None:
    repo = UserRepo(db)
    user = await repo.get(user_id)
    if not user:
        raise NotFoundError("User not found.")
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentialsError(WRONG_CURRENT_PASSWORD_MSG)
    await repo.set_password_hash(user_id, hash_password(new_password))
    log.info("password changed for user %s", user_id)
