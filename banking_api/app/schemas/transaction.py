"""
Pydantic models for transaction data.

Transactions reference users by id only; nothing checks that the
referenced users exist.  ``recipientId`` is always serialised (``null``
for non‑transfers) whereas ``updatedAt`` only appears once the
transaction has been updated.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Transaction(BaseModel):
    id: int
    user_id: int = Field(..., examples=[1])
    amount: float = Field(..., gt=0, examples=[100.5])
    type: Any = Field(..., examples=["deposit"], description="deposit, withdrawal or transfer")
    recipient_id: Optional[int] = Field(None, examples=[2])
    timestamp: str = Field(..., examples=["2025-09-01T10:00:00.000Z"])
    updated_at: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_public(self) -> Dict[str, Any]:
        exclude = {"updated_at"} if self.updated_at is None else None
        return self.model_dump(by_alias=True, exclude=exclude)
