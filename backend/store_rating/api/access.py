from __future__ import annotations

from fastapi import Depends

from store_rating.api.deps import CurrentUser, get_current_user
from store_rating.core.errors import ForbiddenError
from store_rating.models.enums import UserRole

ROLE_NOT_FOUND_MSG = "Access denied. User role not found."

_ROLE_DENIED_MSG = {
    UserRole.normal_user: "Access denied. Normal user privileges required.",
    UserRole.store_owner: "Access denied. Store owner privileges required.",
    UserRole.system_administrator: "Access denied. Administrator privileges required.",
}


def check_role(user: CurrentUser | None, role: UserRole) -> None:
    """Raise 403 unless ``user`` carries exactly ``role``.

    Meant to run after authentication; a missing identity is still a 403.
    """
    current = UserRole.parse(getattr(user, "role", None)) if user is not None else None
    if current is None:
        raise ForbiddenError(ROLE_NOT_FOUND_MSG)
    if current is not role:
        raise ForbiddenError(_ROLE_DENIED_MSG[role])


def require_role(role: UserRole):
    async def _dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        check_role(user, role)
        return user

    return _dependency


require_admin = require_role(UserRole.system_administrator)
