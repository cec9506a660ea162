"""
Administrative listings.

Both routes are restricted to sessions whose account type is exactly
``premium``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from banking_api.app.core.security import require_account_type
from banking_api.app.core.store import MemoryStore, get_store
from banking_api.app.schemas.common import envelope
from banking_api.app.schemas.user import User
from banking_api.app.services.transaction_service import TransactionService
from banking_api.app.services.user_service import UserService

ADMIN_ACCOUNT_TYPE = "premium"

router = APIRouter()


@router.get("/users")
async def list_all_users(
    current_user: User = Depends(require_account_type(ADMIN_ACCOUNT_TYPE)),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    users = await UserService.list_users(store)
    return envelope(data=[u.to_public() for u in users])


@router.get("/transactions")
async def list_all_transactions(
    current_user: User = Depends(require_account_type(ADMIN_ACCOUNT_TYPE)),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    transactions = await TransactionService.list_transactions(store)
    return envelope(data=[t.to_public() for t in transactions])
