from __future__ import annotations

import os

# Must be set before store_rating.core.config is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import httpx
import pytest

from store_rating.api.deps import get_db
from store_rating.core.db import build_engine, build_sessionmaker
from store_rating.main import app
from store_rating.models.base import Base
from store_rating.models.enums import UserRole
from store_rating.services.accounts import create_account

PASSWORD = "Secret@123"
ADMIN_EMAIL = "admin@example.com"


@pytest.fixture
async def engine():
    eng = build_engine("sqlite+aiosqlite://")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_maker(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def _get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver/api") as c:
        yield c
    app.dependency_overrides.clear()


def auth(token: str) -> dict[str, str]:
    return {"x-auth-token": token}


async def register(client: httpx.AsyncClient, name: str, email: str, password: str = PASSWORD, address: str = "1 Main Street") -> dict:
    resp = await client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": password, "address": address},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["user"]


async def login(client: httpx.AsyncClient, email: str, password: str = PASSWORD) -> str:
    resp = await client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
async def admin_token(client, session_maker) -> str:
    async with session_maker() as s:
        await create_account(
            s,
            name="Platform Administrator One",
            email=ADMIN_EMAIL,
            password=PASSWORD,
            address="HQ",
            role=UserRole.system_administrator,
        )
        await s.commit()
    return await login(client, ADMIN_EMAIL)


@pytest.fixture
async def user_token(client) -> str:
    await register(client, "Normal Rating User One", "user1@example.com")
    return await login(client, "user1@example.com")


async def create_store(client: httpx.AsyncClient, admin_token: str, name: str, email: str, address: str = "Market Road", owner_id: int | None = None) -> dict:
    body = {"name": name, "email": email, "address": address}
    if owner_id is not None:
        body["owner_id"] = owner_id
    resp = await client.post("/admin/stores", json=body, headers=auth(admin_token))
    assert resp.status_code == 201, resp.text
    return resp.json()
