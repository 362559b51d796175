from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Protocol

from store_rating.core.json import dumps, loads
from store_rating.models.enums import UserRole


class SessionStore(Protocol):
    def load(self) -> dict | None: ...

    def save(self, data: dict) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    def __init__(self, data: dict | None = None):
        self.data = data

    def load(self) -> dict | None:
        return self.data

    def save(self, data: dict) -> None:
        self.data = dict(data)

    def clear(self) -> None:
        self.data = None


class FileSessionStore:
    """Keeps ``{token, user}`` as a JSON file between runs."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> dict | None:
        if not os.path.exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read()
        if not raw.strip():
            return None
        try:
            data = loads(raw)
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def save(self, data: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(dumps(data, pretty=True))

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)


@dataclass
class SessionContext:
    """Token and user of the signed-in client, mirrored into ``store``."""

    store: SessionStore
    token: str | None = None
    user: dict[str, Any] | None = field(default=None)

    @classmethod
    def restore(cls, store: SessionStore) -> "SessionContext":
        data = store.load() or {}
        return cls(store=store, token=data.get("token"), user=data.get("user"))

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    @property
    def role(self) -> UserRole | None:
        return UserRole.parse((self.user or {}).get("role"))

    def sign_in(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = dict(user)
        self.store.save({"token": self.token, "user": self.user})

    def sign_out(self) -> None:
        self.token = None
        self.user = None
        self.store.clear()
