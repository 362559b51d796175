"""Role-specific dashboard loading for API clients."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from store_rating.client.api_client import StoreRatingClient
from store_rating.client.session import SessionContext
from store_rating.models.enums import UserRole


class UnknownRoleError(ValueError):
    pass


class NotSignedInError(RuntimeError):
    pass


@dataclass
class Dashboard:
    role: UserRole
    data: dict[str, Any] = field(default_factory=dict)


async def login(client: StoreRatingClient, session: SessionContext, email: str, password: str) -> Dashboard:
    res = await client.login(email, password)
    session.sign_in(res["token"], res["user"])
    return await load_dashboard(client, session)


def logout(client: StoreRatingClient, session: SessionContext) -> None:
    client.token = None
    session.sign_out()


async def _normal_user(client: StoreRatingClient) -> dict[str, Any]:
    return {"stores": await client.list_stores()}


async def _store_owner(client: StoreRatingClient) -> dict[str, Any]:
    return {"owner": await client.owner_dashboard()}


async def _system_administrator(client: StoreRatingClient) -> dict[str, Any]:
    return {
        "stats": await client.stats(),
        "users": await client.admin_users(),
        "stores": await client.admin_stores(),
    }


# One loader per role; keep in step with UserRole.
LOADERS = {
    UserRole.normal_user: _normal_user,
    UserRole.store_owner: _store_owner,
    UserRole.system_administrator: _system_administrator,
}


async def load_dashboard(client: StoreRatingClient, session: SessionContext) -> Dashboard:
    if not session.is_authenticated:
        raise NotSignedInError("Not signed in")
    client.token = session.token

    role = session.role
    loader = LOADERS.get(role) if role is not None else None
    if loader is None:
        raise UnknownRoleError(f"Unknown role: {(session.user or {}).get('role')!r}")
    return Dashboard(role, await loader(client))
