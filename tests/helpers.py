"""
Request helpers mirroring what the end‑to‑end suite does against the API.
"""
from typing import Any, Dict, Optional

from httpx import AsyncClient

DEFAULT_PASSWORD = "test-password"


def make_user(**overrides: Any) -> Dict[str, Any]:
    user = {"name": "John Doe", "email": "john@example.com", "accountType": "premium"}
    user.update(overrides)
    return user


async def create_user(client: AsyncClient, **overrides: Any) -> Dict[str, Any]:
    response = await client.post("/api/users", json=make_user(**overrides))
    assert response.status_code == 200, response.text
    return response.json()["data"]


async def login(client: AsyncClient, email: str, password: Optional[str] = DEFAULT_PASSWORD) -> str:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
