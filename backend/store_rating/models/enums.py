from __future__ import annotations

import enum


class UserRole(str, enum.Enum):
    """Platform-wide role.

    The value is the display string stored in ``users.role`` and sent over the
    wire; callers dispatch on the enum member, never on the raw string.
    """
    normal_user = "Normal User"
    store_owner = "Store Owner"
    system_administrator = "System Administrator"

    @classmethod
    def values(cls) -> list[str]:
        return [e.value for e in cls]

    @classmethod
    def parse(cls, raw: str | None) -> "UserRole | None":
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


MIN_RATING = 1
MAX_RATING = 5
