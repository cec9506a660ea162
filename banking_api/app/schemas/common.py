"""
Response envelope and time helpers shared by all endpoints.

Every response body has the shape ``{success, data?, error?, message?}``.
Errors are produced by the handlers in ``core.errors``; this module
builds the success side.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def envelope(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Build a success envelope, omitting keys that were not supplied."""
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return body


def iso_now() -> str:
    """Current UTC time as ``2025-09-01T10:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_ms() -> int:
    return int(time.time() * 1000)
