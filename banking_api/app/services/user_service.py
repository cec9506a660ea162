"""
Business logic for users.

``UserService`` validates payloads and mutates the user collection of a
``MemoryStore``.  Deleting a user also deletes the transactions the
user owns; transactions naming the user as ``recipientId`` are left
untouched.
"""

import logging
from typing import Any, Dict, List

from ..core.errors import NotFound
from ..core.store import MemoryStore
from ..schemas.common import iso_now
from ..schemas.user import User
from .validation import validate_user_payload

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


class UserService:
    """Operations on the users held in the store.

    Emails are not checked for uniqueness and ``accountType`` accepts any
    truthy value.
    """

    @classmethod
    async def create_user(cls, store: MemoryStore, body: Dict[str, Any]) -> User:
        """Validate ``body`` and store a new user with the next shared id."""
        fields = validate_user_payload(body)
        with store.locked():
            user = User(id=store.next_entity_id(), **fields)
            store.users.insert(user)
        logger.info("Created user %s (%s)", user.id, user.account_type)
        return user

    @classmethod
    async def get_user(cls, store: MemoryStore, user_id: int) -> User:
        user = store.users.get(user_id)
        if user is None:
            raise NotFound(USER_NOT_FOUND)
        return user

    @classmethod
    async def list_users(cls, store: MemoryStore) -> List[User]:
        return store.users.all()

    @classmethod
    async def update_user(cls, store: MemoryStore, user_id: int, body: Dict[str, Any]) -> User:
        """Replace name, email and account type of an existing user.

        The lookup happens before validation, so an unknown id yields
        ``NotFound`` even for an invalid body.  Existing sessions keep
        the copy of the user they were created with.
        """
        with store.locked():
            current = store.users.get(user_id)
            if current is None:
                raise NotFound(USER_NOT_FOUND)
            fields = validate_user_payload(body)
            updated = current.model_copy(update={**fields, "updated_at": iso_now()})
            store.users.replace(updated)
        logger.info("Updated user %s", user_id)
        return updated

    @classmethod
    async def delete_user(cls, store: MemoryStore, user_id: int) -> User:
        """Delete a user together with the transactions they own.

        Returns the removed user.  Raises ``NotFound`` if there is no
        such user.
        """
        with store.locked():
            if store.users.get(user_id) is None:
                raise NotFound(USER_NOT_FOUND)
            removed_tx = store.transactions.remove_where(lambda t: t.user_id == user_id)
            user = store.users.remove(user_id)
        logger.info("Deleted user %s and %d transaction(s)", user_id, removed_tx)
        return user
