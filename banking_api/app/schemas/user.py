"""
Pydantic models for user data.

Users are exchanged with clients using camelCase keys (``accountType``,
``updatedAt``), while the Python side uses snake_case attributes.  The
``UserView`` is the reduced shape returned by the auth endpoints; it
never carries ``updatedAt``.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UserView(BaseModel):
    """Public subset of a user returned by login and ``/auth/me``."""

    id: int
    # Any truthy JSON value is accepted for name and account type.
    name: Any = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    account_type: Any = Field(..., examples=["premium"], description="basic, premium or enterprise")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_public(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class User(UserView):
    """Stored user record."""

    # ISO‑8601 timestamp of the last successful PUT; absent until then.
    updated_at: Optional[str] = Field(None, examples=["2025-09-01T10:00:00.000Z"])

    def view(self) -> UserView:
        return UserView(id=self.id, name=self.name, email=self.email, account_type=self.account_type)

    def to_public(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
