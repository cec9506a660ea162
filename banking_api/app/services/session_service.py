"""
Session lifecycle: login, token resolution and logout.

A session is *active* from login until it is either removed by logout
or found to be older than ``settings.session_ttl_hours``.  Expired
sessions are not swept in the background; they are evicted at the
moment a request presents their token.
"""

import logging
from typing import Any, Optional, Tuple

from ..core.config import settings
from ..core.errors import (
    InvalidCredentials,
    InvalidOrExpiredToken,
    MissingFields,
    MissingToken,
    TokenExpired,
)
from ..core.security import new_session_token, verify_password
from ..core.store import MemoryStore
from ..schemas.common import now_ms
from ..schemas.session import Session
from ..schemas.user import UserView

logger = logging.getLogger(__name__)


class SessionService:
    """Issue, check and revoke bearer tokens."""

    @classmethod
    async def login(cls, store: MemoryStore, email: Any, password: Any) -> Tuple[str, UserView]:
        """Authenticate by email and the shared password.

        The first user whose email matches exactly is chosen.  On
        success a new session holding a copy of that user is stored and
        ``(token, user_view)`` is returned.
        """
        if not email or not password:
            raise MissingFields("Email and password are required")
        with store.locked():
            user = store.users.find(lambda u: u.email == email)
            if user is None or not verify_password(user, password):
                logger.info("Rejected login for unknown user or wrong password")
                raise InvalidCredentials()
            session = Session(
                id=store.next_session_id(),
                token=new_session_token(),
                user_id=user.id,
                user=user.model_copy(deep=True),
                created_at=now_ms(),
            )
            store.sessions.insert(session)
        logger.info("User %s logged in (session %s)", user.id, session.id)
        return session.token, user.view()

    @classmethod
    async def resolve(cls, store: MemoryStore, token: Optional[str]) -> Session:
        """Return the active session for ``token``.

        Raises ``MissingToken`` for an empty token,
        ``InvalidOrExpiredToken`` when no session matches and
        ``TokenExpired`` (after evicting the session) when it has
        outlived its lifetime.
        """
        if not token:
            raise MissingToken()
        with store.locked():
            session = store.sessions.find(lambda s: s.token == token)
            if session is None:
                raise InvalidOrExpiredToken()
            if now_ms() - session.created_at > settings.session_ttl_ms:
                store.sessions.remove(session.id)
                logger.info("Session %s of user %s expired", session.id, session.user_id)
                raise TokenExpired()
        return session

    @classmethod
    async def logout(cls, store: MemoryStore, token: str) -> None:
        with store.locked():
            removed = store.sessions.remove_where(lambda s: s.token == token)
        logger.info("Logged out %d session(s)", removed)
