"""
Server‑side session record.

A session binds an opaque bearer token to a copy of the user taken at
login time.  The copy is never refreshed: edits made to the user later
are only visible after a new login.
"""

from pydantic import BaseModel

from .user import User


class Session(BaseModel):
    id: int
    token: str
    user_id: int
    user: User
    # Epoch milliseconds.
    created_at: int
