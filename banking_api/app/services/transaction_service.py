"""
Business logic for transactions.

Transactions share the id sequence with users.  Neither ``userId`` nor
``recipientId`` is checked against the user collection, so a
transaction may reference a user that does not (or no longer) exist.
"""

import logging
from typing import Any, Dict, List

from ..core.errors import AccessDenied, NotFound
from ..core.store import MemoryStore
from ..schemas.common import iso_now
from ..schemas.transaction import Transaction
from ..schemas.user import UserView
from .validation import TRANSACTION_UPDATE_MESSAGE, validate_transaction_payload

logger = logging.getLogger(__name__)

TRANSACTION_NOT_FOUND = "Transaction not found"


class TransactionService:
    """Create, update, delete and list transactions."""

    @classmethod
    async def create_transaction(cls, store: MemoryStore, body: Dict[str, Any]) -> Transaction:
        fields = validate_transaction_payload(body)
        with store.locked():
            transaction = Transaction(id=store.next_entity_id(), timestamp=iso_now(), **fields)
            store.transactions.insert(transaction)
        logger.info(
            "Created %s transaction %s for user %s",
            transaction.type,
            transaction.id,
            transaction.user_id,
        )
        return transaction

    @classmethod
    async def list_for_user(
        cls, store: MemoryStore, current_user: UserView, user_id: Any
    ) -> List[Transaction]:
        """Return the transactions of ``user_id``.

        Only the owner may list them: any other caller, whatever their
        account type, gets ``AccessDenied``.  ``user_id`` is ``None``
        when the path segment was not an integer, which never matches.
        """
        if user_id is None or current_user.id != user_id:
            logger.warning("User %s denied transactions of %s", current_user.id, user_id)
            raise AccessDenied()
        return store.transactions.filter(lambda t: t.user_id == user_id)

    @classmethod
    async def list_transactions(cls, store: MemoryStore) -> List[Transaction]:
        return store.transactions.all()

    @classmethod
    async def update_transaction(
        cls, store: MemoryStore, transaction_id: int, body: Dict[str, Any]
    ) -> Transaction:
        """Overwrite user, amount, type and recipient of a transaction.

        The creation ``timestamp`` is kept and ``updatedAt`` is set.  A
        falsy ``recipientId`` in the body clears the stored recipient.
        """
        with store.locked():
            current = store.transactions.get(transaction_id)
            if current is None:
                raise NotFound(TRANSACTION_NOT_FOUND)
            fields = validate_transaction_payload(body, TRANSACTION_UPDATE_MESSAGE)
            updated = current.model_copy(update={**fields, "updated_at": iso_now()})
            store.transactions.replace(updated)
        logger.info("Updated transaction %s", transaction_id)
        return updated

    @classmethod
    async def delete_transaction(cls, store: MemoryStore, transaction_id: int) -> Transaction:
        with store.locked():
            transaction = store.transactions.remove(transaction_id)
        if transaction is None:
            raise NotFound(TRANSACTION_NOT_FOUND)
        logger.info("Deleted transaction %s", transaction_id)
        return transaction
