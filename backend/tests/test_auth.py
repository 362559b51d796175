from __future__ import annotations

from store_rating.core.security import create_access_token, decode_token

from conftest import PASSWORD, auth, login, register

NAME = "Regular Customer Account"


async def test_register_returns_user_without_password(client):
    resp = await client.post(
        "/auth/register",
        json={"name": NAME, "email": "Buyer@Example.com", "password": PASSWORD, "address": "  12 Elm St  "},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["msg"] == "User registered successfully!"
    assert set(body["user"]) == {"id", "name", "email", "role"}
    assert body["user"]["email"] == "buyer@example.com"
    assert body["user"]["role"] == "Normal User"


async def test_register_duplicate_email_is_rejected(client):
    await register(client, NAME, "dup@example.com")
    resp = await client.post(
        "/auth/register",
        json={"name": NAME, "email": "dup@example.com", "password": PASSWORD, "address": "x"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "User with this email already exists."}


async def test_register_validation_errors_are_listed_per_field(client):
    resp = await client.post(
        "/auth/register",
        json={"name": "Too short", "email": "not-an-email", "password": "weakpass", "address": "a" * 401},
    )
    assert resp.status_code == 400
    errors = {e["field"]: e["message"] for e in resp.json()["errors"]}
    assert errors["name"] == "Name must be between 20 and 60 characters."
    assert errors["email"] == "Please include a valid email."
    assert errors["password"].startswith("Password must be 8-16 characters")
    assert errors["address"] == "Address must not exceed 400 characters."


async def test_password_rule_requires_uppercase_and_special(client):
    for bad in ("secret@123", "Secret1234", "S@1", "Secret@123456789X"):
        resp = await client.post(
            "/auth/register",
            json={"name": NAME, "email": "rules@example.com", "password": bad, "address": ""},
        )
        assert resp.status_code == 400, bad
        assert [e["field"] for e in resp.json()["errors"]] == ["password"]


async def test_login_after_register_issues_normal_user_token(client):
    user = await register(client, NAME, "login@example.com")
    resp = await client.post("/auth/login", json={"email": "login@example.com", "password": PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["msg"] == "Login successful!"
    assert body["user"] == {"id": user["id"], "name": NAME, "role": "Normal User"}

    claims = decode_token(body["token"])
    assert claims["sub"] == str(user["id"])
    assert claims["role"] == "Normal User"
    assert claims["name"] == NAME
    assert claims["exp"] - claims["iat"] == 5 * 60 * 60


async def test_login_failures_do_not_reveal_which_factor_was_wrong(client):
    await register(client, NAME, "known@example.com")
    wrong_password = await client.post("/auth/login", json={"email": "known@example.com", "password": "Wrong@Pass1"})
    unknown_email = await client.post("/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"msg": "Invalid credentials."}


async def test_protected_route_requires_token(client):
    resp = await client.get("/stores")
    assert resp.status_code == 401

    resp = await client.get("/stores", headers=auth("garbage"))
    assert resp.status_code == 401
    assert resp.json() == {"msg": "Token is not valid."}


async def test_expired_token_is_rejected(client):
    user = await register(client, NAME, "expired@example.com")
    token = create_access_token(str(user["id"]), ttl_minutes=-1, extra={"name": NAME, "role": "Normal User"})
    resp = await client.get("/stores", headers=auth(token))
    assert resp.status_code == 401


async def test_change_password_switches_credentials(client):
    await register(client, NAME, "pw@example.com")
    token = await login(client, "pw@example.com")

    resp = await client.put(
        "/users/password",
        json={"currentPassword": PASSWORD, "newPassword": "Fresh#Pass9"},
        headers=auth(token),
    )
    assert resp.status_code == 200
    assert resp.json() == {"msg": "Password updated successfully."}

    old = await client.post("/auth/login", json={"email": "pw@example.com", "password": PASSWORD})
    assert old.status_code == 400
    assert await login(client, "pw@example.com", "Fresh#Pass9")


async def test_change_password_rejects_wrong_current_password(client):
    await register(client, NAME, "pw2@example.com")
    token = await login(client, "pw2@example.com")
    resp = await client.put(
        "/users/password",
        json={"currentPassword": "Nope@1234", "newPassword": "Fresh#Pass9"},
        headers=auth(token),
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Incorrect current password."}


async def test_change_password_validates_new_password(client):
    await register(client, NAME, "pw3@example.com")
    token = await login(client, "pw3@example.com")
    resp = await client.put(
        "/users/password",
        json={"currentPassword": PASSWORD, "newPassword": "short"},
        headers=auth(token),
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "newPassword"


async def test_change_password_for_vanished_user_is_404(client):
    token = create_access_token("9999", extra={"name": "ghost", "role": "Normal User"})
    resp = await client.put(
        "/users/password",
        json={"currentPassword": PASSWORD, "newPassword": "Fresh#Pass9"},
        headers=auth(token),
    )
    assert resp.status_code == 404


async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"ok": True}
