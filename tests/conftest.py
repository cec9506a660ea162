"""
Shared fixtures for the Banking API tests.

Every test gets its own ``MemoryStore`` and application, so ids start
at 1 and no users or sessions leak between tests.  Requests go through
the ASGI app in‑process; no live server is needed.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from banking_api.app.core.config import settings
from banking_api.app.core.store import MemoryStore
from banking_api.app.main import create_app
from tests.helpers import DEFAULT_PASSWORD


@pytest.fixture(autouse=True)
def default_password(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(settings, "default_user_password", DEFAULT_PASSWORD)
    return DEFAULT_PASSWORD


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest_asyncio.fixture
async def client(store: MemoryStore):
    """Async httpx client bound to a fresh application."""
    app = create_app(store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
