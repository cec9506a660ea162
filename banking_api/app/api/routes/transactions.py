"""
Transaction endpoints.

Listing a user's transactions requires that user's own session; the
other operations are public.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from banking_api.app.core.security import get_current_user
from banking_api.app.core.store import MemoryStore, get_store
from banking_api.app.schemas.common import envelope
from banking_api.app.schemas.user import User
from banking_api.app.services.transaction_service import TransactionService
from banking_api.app.services.validation import parse_path_id

router = APIRouter()


@router.post("")
async def create_transaction(
    body: Optional[Dict[str, Any]] = Body(None),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Record a deposit, withdrawal or transfer.

    ``recipientId`` is required for transfers.  The user ids are not
    checked for existence.
    """
    transaction = await TransactionService.create_transaction(store, body or {})
    return envelope(data=transaction.to_public())


@router.get("/{user_id}")
async def list_user_transactions(
    user_id: str,
    current_user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """List the caller's own transactions."""
    transactions = await TransactionService.list_for_user(store, current_user, parse_path_id(user_id))
    return envelope(data=[t.to_public() for t in transactions])


@router.put("/{transaction_id}")
async def update_transaction(
    transaction_id: str,
    body: Optional[Dict[str, Any]] = Body(None),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    transaction = await TransactionService.update_transaction(store, parse_path_id(transaction_id), body or {})
    return envelope(data=transaction.to_public())


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    transaction = await TransactionService.delete_transaction(store, parse_path_id(transaction_id))
    return envelope(data=transaction.to_public())
