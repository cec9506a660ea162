"""
Security helpers: credential check, token minting and FastAPI
dependencies for bearer authentication and role checks.

All users share one password, ``settings.default_user_password``.
``verify_password`` is the only place that knows this, so per‑user
hashed credentials can replace it without touching the routes.
Session tokens are random url‑safe strings with no embedded meaning;
the server looks them up in the session collection.
"""

import hmac
import logging
import secrets
from typing import Callable, Optional

from fastapi import Depends, Header

from .config import settings
from .errors import InsufficientPermissions
from .store import MemoryStore, get_store
from ..schemas.user import User

logger = logging.getLogger(__name__)


def verify_password(user: User, password: str) -> bool:
    """Check ``password`` for ``user``.

    Every user is checked against the configured default password.  If
    none is configured no password is accepted.
    """
    expected = settings.default_user_password
    if not expected or not isinstance(password, str):
        return False
    return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))


def new_session_token() -> str:
    """Return a fresh, unguessable session token."""
    return secrets.token_urlsafe(32)


def get_bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Extract the token from an ``Authorization: <scheme> <token>`` header.

    Only the second space‑separated word is used and the scheme is not
    checked, so ``Basic abc`` is looked up as token ``abc`` (and then
    rejected as unknown).
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    store: MemoryStore = Depends(get_store),
) -> User:
    """Dependency that returns the user snapshot of the caller's session.

    Raises 401 errors (``MissingToken``, ``InvalidOrExpiredToken``,
    ``TokenExpired``) before the route body runs.
    """
    # Imported here: session_service depends on this module.
    from ..services.session_service import SessionService

    session = await SessionService.resolve(store, token)
    return session.user


def require_account_type(required: str) -> Callable[..., User]:
    """Dependency factory enforcing an exact account type.

    Use it as ``Depends(require_account_type("premium"))``.  There is
    no hierarchy: ``enterprise`` does not satisfy ``premium``.
    """

    async def _account_type_dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.account_type != required:
            logger.warning(
                "User %s (%s) lacks account type %s", current_user.id, current_user.account_type, required
            )
            raise InsufficientPermissions()
        return current_user

    return _account_type_dependency
