"""Strict readers for the ``{success, message, data}`` response envelope.

Every endpoint answers with the same envelope. Anything that does not match
the documented shape is rejected with :class:`SchemaError` instead of being
guessed at, so callers only ever see a well-formed payload or a domain
failure.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

from returns_tracker.errors import ApiError, SchemaError

V = TypeVar("V")


def parse_date(value: Any) -> Optional[datetime]:
    """Convert an ISO string (``Z`` suffix allowed) → datetime | None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def require(doc: Any, key: str, kind: Type[V]) -> V:
    """Return ``doc[key]`` if present and of type ``kind``."""
    if not isinstance(doc, dict):
        raise SchemaError(f"Expected an object holding '{key}', got {type(doc).__name__}")
    if key not in doc:
        raise SchemaError(f"Missing field '{key}'")
    value = doc[key]
    # bool is an int subclass; never accept it where a number is expected
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(
            f"Field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def require_list(doc: Any, key: str) -> List[Dict[str, Any]]:
    items = require(doc, key, list)
    for item in items:
        if not isinstance(item, dict):
            raise SchemaError(f"Entries of '{key}' should be objects")
    return items


def unwrap(payload: Any) -> Any:
    """
    Validate the envelope and return its ``data`` member.

    Raises:
        SchemaError: the payload is not an envelope
        ApiError: the envelope reports ``success=false``
    """
    success = require(payload, "success", bool)
    message = payload.get("message", "")
    if not isinstance(message, str):
        raise SchemaError("Field 'message' should be str")
    if not success:
        raise ApiError(message or "Request was not successful")
    if "data" not in payload:
        raise SchemaError("Missing field 'data'")
    return payload["data"]
