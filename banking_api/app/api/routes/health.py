"""
Unauthenticated service endpoints: liveness and client configuration.
"""

from typing import Any, Dict

from fastapi import APIRouter

from banking_api.app.core.config import settings
from banking_api.app.schemas.common import envelope

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Report that the API process is up."""
    return envelope(message="API is running")


@router.get("/config")
async def client_config() -> Dict[str, Any]:
    """Expose the shared login password to the test UI and suite.

    This is demo behaviour: the password is public by design of the
    test harness, and ``null`` when it is not configured.
    """
    return envelope(data={"defaultPassword": settings.default_user_password})
