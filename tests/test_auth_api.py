"""
API tests for login, sessions and the admin role gate.
"""
import pytest
from httpx import AsyncClient

from banking_api.app.core.config import settings
from banking_api.app.core.store import MemoryStore
from tests.helpers import bearer, create_user, login


@pytest.mark.asyncio
async def test_health_and_config(client: AsyncClient, default_password: str) -> None:
    response = await client.get("/api/health")
    assert response.json() == {"success": True, "message": "API is running"}

    response = await client.get("/api/config")
    assert response.json() == {"success": True, "data": {"defaultPassword": default_password}}


@pytest.mark.asyncio
async def test_login_returns_token_and_user_view(client: AsyncClient, default_password: str) -> None:
    user = await create_user(client)
    response = await client.post("/api/auth/login", json={"email": user["email"], "password": default_password})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token"]
    assert data["user"] == user


@pytest.mark.asyncio
async def test_tokens_are_unique_per_login(client: AsyncClient) -> None:
    user = await create_user(client)
    assert await login(client, user["email"]) != await login(client, user["email"])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [("nobody@example.com", None), ("john@example.com", "wrongpassword")],
)
async def test_invalid_credentials(client: AsyncClient, default_password: str, email, password) -> None:
    await create_user(client)
    response = await client.post("/api/auth/login", json={"email": email, "password": password or default_password})
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid credentials"}


@pytest.mark.asyncio
async def test_login_fails_without_configured_password(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    user = await create_user(client)
    monkeypatch.setattr(settings, "default_user_password", None)
    response = await client.post("/api/auth/login", json={"email": user["email"], "password": "anything"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_requires_both_fields(client: AsyncClient) -> None:
    response = await client.post("/api/auth/login", json={})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email and password are required"}


@pytest.mark.asyncio
async def test_me_is_stable_across_requests(client: AsyncClient) -> None:
    user = await create_user(client)
    token = await login(client, user["email"])
    first = await client.get("/api/auth/me", headers=bearer(token))
    second = await client.get("/api/auth/me", headers=bearer(token))
    assert first.json() == second.json() == {"success": True, "data": user}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers, error",
    [
        ({}, "Access token required"),
        ({"Authorization": "Bearer"}, "Access token required"),
        ({"Authorization": "Bearer invalid_token"}, "Invalid or expired token"),
        ({"Authorization": "InvalidFormat token123"}, "Invalid or expired token"),
    ],
)
async def test_me_rejects_bad_tokens(client: AsyncClient, headers: dict, error: str) -> None:
    response = await client.get("/api/auth/me", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": error}


@pytest.mark.asyncio
async def test_logout_invalidates_token(client: AsyncClient) -> None:
    user = await create_user(client)
    token = await login(client, user["email"])

    response = await client.post("/api/auth/logout", headers=bearer(token))
    assert response.json() == {"success": True, "message": "Logged out successfully"}

    response = await client.get("/api/auth/me", headers=bearer(token))
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"

    response = await client.post("/api/auth/logout", headers=bearer(token))
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_without_token(client: AsyncClient) -> None:
    response = await client.post("/api/auth/logout")
    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"


@pytest.mark.asyncio
async def test_expired_session_is_evicted(client: AsyncClient, store: MemoryStore) -> None:
    user = await create_user(client)
    token = await login(client, user["email"])
    session = store.sessions.find(lambda s: s.token == token)
    session.created_at -= settings.session_ttl_ms + 1

    response = await client.get("/api/auth/me", headers=bearer(token))
    assert response.status_code == 401
    assert response.json()["error"] == "Token expired"
    assert len(store.sessions) == 0

    response = await client.get("/api/auth/me", headers=bearer(token))
    assert response.json()["error"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_session_keeps_user_snapshot(client: AsyncClient) -> None:
    user = await create_user(client, accountType="basic")
    token = await login(client, user["email"])
    await client.put(
        f"/api/users/{user['id']}",
        json={"name": "Renamed", "email": user["email"], "accountType": "premium"},
    )

    me = (await client.get("/api/auth/me", headers=bearer(token))).json()["data"]
    assert me["name"] == "John Doe"
    assert me["accountType"] == "basic"
    assert (await client.get("/api/admin/users", headers=bearer(token))).status_code == 403

    fresh = await login(client, user["email"])
    assert (await client.get("/api/admin/users", headers=bearer(fresh))).status_code == 200


@pytest.mark.asyncio
async def test_premium_user_reaches_admin_endpoints(client: AsyncClient) -> None:
    user = await create_user(client)
    await client.post("/api/transactions", json={"userId": user["id"], "amount": 3, "type": "deposit"})
    token = await login(client, user["email"])

    users = await client.get("/api/admin/users", headers=bearer(token))
    transactions = await client.get("/api/admin/transactions", headers=bearer(token))
    assert users.json() == {"success": True, "data": [user]}
    assert len(transactions.json()["data"]) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("account_type", ["basic", "enterprise", "Premium"])
async def test_admin_requires_exact_premium(client: AsyncClient, account_type: str) -> None:
    user = await create_user(client, accountType=account_type)
    token = await login(client, user["email"])
    for path in ("/api/admin/users", "/api/admin/transactions"):
        response = await client.get(path, headers=bearer(token))
        assert response.status_code == 403
        assert response.json() == {"success": False, "error": "Insufficient permissions"}


@pytest.mark.asyncio
async def test_admin_without_token(client: AsyncClient) -> None:
    response = await client.get("/api/admin/users")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Access token required"}


@pytest.mark.asyncio
async def test_unknown_routes_and_bad_bodies_use_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.headers["content-type"].startswith("application/json")

    response = await client.post("/api/users", content=b"[1, 2]", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid request body"}


@pytest.mark.asyncio
async def test_login_without_body(client: AsyncClient) -> None:
    response = await client.post("/api/auth/login")
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email and password are required"}
