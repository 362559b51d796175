from __future__ import annotations

from typing import Any

import httpx

from store_rating.core.config import settings


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None, payload: Any | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class StoreRatingClient:
    """Async client for the store-rating REST API.

    ``token`` is sent in the auth header on every request once set.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "StoreRatingClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        headers = dict(kwargs.pop("headers", None) or {})
        if self.token:
            headers[settings.AUTH_HEADER] = self.token
        params = kwargs.pop("params", None)
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v not in (None, "")}
        resp = await self._client.request(method, url, headers=headers, **kwargs)
        if resp.status_code >= 400:
            raise ApiError(_error_message(resp), resp.status_code, _safe_json(resp))
        return resp.json()

    # auth
    async def register(self, name: str, email: str, password: str, address: str | None = None) -> dict:
        return await self._request(
            "POST", "/auth/register", json={"name": name, "email": email, "password": password, "address": address}
        )

    async def login(self, email: str, password: str) -> dict:
        data = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data.get("token")
        return data

    async def change_password(self, current_password: str, new_password: str) -> dict:
        return await self._request(
            "PUT", "/users/password", json={"currentPassword": current_password, "newPassword": new_password}
        )

    # stores / ratings
    async def list_stores(self, name: str | None = None, address: str | None = None) -> list[dict]:
        return await self._request("GET", "/stores", params={"name": name, "address": address})

    async def owner_dashboard(self) -> dict:
        return await self._request("GET", "/stores/owner-dashboard")

    async def rate_store(self, store_id: int, rating: int) -> dict:
        return await self._request("POST", "/ratings", json={"store_id": store_id, "rating": rating})

    # admin
    async def stats(self) -> dict:
        return await self._request("GET", "/admin/stats")

    async def admin_users(self, name: str | None = None, email: str | None = None, role: str | None = None) -> list[dict]:
        return await self._request("GET", "/admin/users", params={"name": name, "email": email, "role": role})

    async def admin_stores(self, name: str | None = None, email: str | None = None, address: str | None = None) -> list[dict]:
        return await self._request("GET", "/admin/stores", params={"name": name, "email": email, "address": address})

    async def create_user(self, **fields) -> dict:
        return await self._request("POST", "/admin/users", json=fields)

    async def create_store(self, **fields) -> dict:
        return await self._request("POST", "/admin/stores", json=fields)


def _safe_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _error_message(resp: httpx.Response) -> str:
    data = _safe_json(resp)
    if isinstance(data, dict):
        if data.get("msg"):
            return str(data["msg"])
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e.get("message")) for e in errors if isinstance(e, dict))
    return f"HTTP {resp.status_code}"
