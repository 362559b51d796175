from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import APIKeyHeader
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.core.config import settings
from store_rating.core.db import get_session
from store_rating.core.errors import UnauthorizedError
from store_rating.core.security import decode_token

log = logging.getLogger(__name__)

token_header = APIKeyHeader(name=settings.AUTH_HEADER, auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity decoded from a verified token."""
    id: int
    name: str
    role: str | None


async def get_db() -> AsyncSession:
    async for s in get_session():
        yield s


async def get_current_user(token: str | None = Depends(token_header)) -> CurrentUser:
    if not token:
        raise UnauthorizedError("No token, authorization denied.")
    try:
        payload = decode_token(token)
    except JWTError as e:
        log.debug("rejected token: %s", e)
        raise UnauthorizedError("Token is not valid.")

    sub = payload.get("sub")
    if not sub or not str(sub).isdigit():
        raise UnauthorizedError("Token is not valid.")
    return CurrentUser(id=int(sub), name=str(payload.get("name") or ""), role=payload.get("role"))
