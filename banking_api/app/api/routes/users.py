"""
User endpoints.

Creation, lookup, update and deletion are public; only the admin
listing in ``admin.py`` requires a session.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from banking_api.app.core.store import MemoryStore, get_store
from banking_api.app.schemas.common import envelope
from banking_api.app.services.user_service import UserService
from banking_api.app.services.validation import parse_path_id

router = APIRouter()


@router.post("")
async def create_user(
    body: Optional[Dict[str, Any]] = Body(None),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Register a new user.

    Requires ``name``, ``email`` (containing ``@``) and ``accountType``.
    """
    user = await UserService.create_user(store, body or {})
    return envelope(data=user.to_public())


@router.get("/{user_id}")
async def get_user(user_id: str, store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    user = await UserService.get_user(store, parse_path_id(user_id))
    return envelope(data=user.to_public())


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: Optional[Dict[str, Any]] = Body(None),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Replace a user's name, email and account type; sets ``updatedAt``."""
    user = await UserService.update_user(store, parse_path_id(user_id), body or {})
    return envelope(data=user.to_public())


@router.delete("/{user_id}")
async def delete_user(user_id: str, store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    """Delete a user together with all of their transactions.

    Returns the deleted user.
    """
    user = await UserService.delete_user(store, parse_path_id(user_id))
    return envelope(data=user.to_public())
