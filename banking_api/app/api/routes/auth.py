"""
Authentication endpoints: login, logout and the current user.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from banking_api.app.core.security import get_bearer_token, get_current_user
from banking_api.app.core.store import MemoryStore, get_store
from banking_api.app.schemas.common import envelope
from banking_api.app.schemas.user import User
from banking_api.app.services.session_service import SessionService

router = APIRouter()


@router.post("/login")
async def login(
    body: Optional[Dict[str, Any]] = Body(None),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Authenticate a user and return a bearer token.

    Expects ``email`` and ``password``.  Returns the bearer token and a
    reduced view of the user (never the password).
    """
    body = body or {}
    token, user = await SessionService.login(store, body.get("email"), body.get("password"))
    return envelope(data={"token": token, "user": user.to_public()})


@router.post("/logout")
async def logout(
    current_user: User = Depends(get_current_user),
    token: str = Depends(get_bearer_token),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Revoke the session of the presented token."""
    await SessionService.logout(store, token)
    return envelope(message="Logged out successfully")


@router.get("/me")
async def me(current_user: User = Depends(get_current_user)) -> Dict[str, Any]:
    """Return the user as captured when the session was created."""
    return envelope(data=current_user.view().to_public())
