"""
Payload validation for users and transactions.

These functions are pure: they inspect a decoded JSON body and either
return the normalised values or raise one of the ``core.errors``
exceptions.  They only check presence and basic types.  In particular
``accountType`` and transaction ``type`` are not checked against their
expected values, and referenced user ids are not looked up.
"""

import re
from numbers import Real
from typing import Any, Dict, Optional

from ..core.errors import (
    InvalidAmount,
    InvalidEmail,
    InvalidIdentifier,
    MissingFields,
    MissingRecipient,
)

USER_FIELDS_MESSAGE = "Email is required, Valid account type is required"
TRANSACTION_CREATE_MESSAGE = "Missing required fields"
TRANSACTION_UPDATE_MESSAGE = "User ID, amount, and type are required"

_INTEGER = re.compile(r"-?[0-9]+")


def _to_int(value: Any) -> int:
    """Coerce a JSON id (number or numeric string) to ``int``."""
    if isinstance(value, bool):
        raise InvalidIdentifier()
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.fullmatch(value):
        return int(value)
    raise InvalidIdentifier()


def _to_amount(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidAmount()
    if isinstance(value, Real):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value)
        except ValueError:
            raise InvalidAmount()
    else:
        raise InvalidAmount()
    # NaN compares false against everything, so test for the positive case.
    if not amount > 0 or amount == float("inf"):
        raise InvalidAmount()
    return amount


def validate_user_payload(body: Dict[str, Any]) -> Dict[str, Any]:
    """Check a user create/update body.

    Returns ``{"name", "email", "account_type"}``.  Raises
    ``MissingFields`` unless all three are present and truthy, and
    ``InvalidEmail`` unless the email is a string containing ``@``.
    ``name`` and ``accountType`` are stored as given, whatever their
    JSON type.
    """
    name = body.get("name")
    email = body.get("email")
    account_type = body.get("accountType")
    if not name or not email or not account_type:
        raise MissingFields(USER_FIELDS_MESSAGE)
    if not isinstance(email, str) or "@" not in email:
        raise InvalidEmail()
    return {"name": name, "email": email, "account_type": account_type}


def validate_transaction_payload(
    body: Dict[str, Any],
    missing_message: str = TRANSACTION_CREATE_MESSAGE,
) -> Dict[str, Any]:
    """Check a transaction create/update body.

    Returns ``{"user_id", "amount", "type", "recipient_id"}`` with ids
    as ``int`` and the amount as ``float``.  ``recipient_id`` is
    ``None`` whenever the body's ``recipientId`` is falsy.

    Raises
    ------
    MissingFields
        ``userId``, ``amount`` or ``type`` is missing or falsy.
    InvalidAmount
        ``amount`` is not a number greater than zero.
    MissingRecipient
        ``type`` is ``"transfer"`` without a ``recipientId``.
    InvalidIdentifier
        ``userId`` or ``recipientId`` is not an integer.
    """
    user_id = body.get("userId")
    amount = body.get("amount")
    tx_type = body.get("type")
    recipient_id = body.get("recipientId")

    if not user_id or not amount or not tx_type:
        raise MissingFields(missing_message)
    amount = _to_amount(amount)
    if tx_type == "transfer" and not recipient_id:
        raise MissingRecipient()

    return {
        "user_id": _to_int(user_id),
        "amount": amount,
        "type": tx_type,
        "recipient_id": _to_int(recipient_id) if recipient_id else None,
    }


def parse_path_id(raw: str) -> Optional[int]:
    """Parse an id taken from the URL; ``None`` unless it is a plain integer.

    Only ASCII digits with an optional leading ``-`` are accepted, so
    ``1_0``, padded values and non‑ASCII digits never resolve to an
    entity.
    """
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        return None
    return int(raw)
