"""
Schemas & Canonicalization
File: canonical.py

Purpose: Deterministic JSON encoding for structured Merkle leaf items.

Items that are not bytes, text or BytesHashable are rendered to canonical
JSON before hashing, so two logically equal values always produce the same
leaf digest regardless of dict insertion order or timezone.
"""

import json
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

# No whitespace between tokens
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def ensure_utc(dt: datetime) -> datetime:
    """
    Return a timezone-aware datetime in UTC.

    Naive datetimes are taken to already be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime_canonical(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 with a Z suffix.

    Args:
        dt: A datetime object.

    Returns:
        e.g. "2026-01-27T21:35:00Z", with microseconds only when non-zero.
    """
    utc_dt = ensure_utc(dt)
    if utc_dt.microsecond == 0:
        return utc_dt.strftime("%Y-%m-%dT%H:%M:%SZ")
    return utc_dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _validate_float(value: float, path: str = "") -> None:
    if not math.isfinite(value):
        raise CanonicalizationException(
            message=f"Non-finite float value encountered: {value}",
            details={"path": path, "value": str(value)},
        )


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively convert a value into a JSON-ready canonical form.

    Args:
        value: Any Python value.
        path: Location of ``value`` inside the top-level object, used in
            error details.

    Returns:
        A structure made only of dict, list, str, int, float, bool and None.

    Raises:
        CanonicalizationException: For NaN/Infinity floats or values whose
            type has no canonical form.
    """
    if value is None:
        return None

    # Before the scalar checks: str/int-based enums serialize as plain values
    if isinstance(value, Enum):
        return canonicalize_value(value.value, path)

    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return value

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        _validate_float(value, path)
        return value

    if isinstance(value, str):
        return value

    if isinstance(value, datetime):
        return format_datetime_canonical(value)

    if isinstance(value, BaseModel):
        dumped = value.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
        )
        return canonicalize_value(dumped, path)

    if isinstance(value, dict):
        # Keys are sorted at serialization time
        canonical: dict[str, Any] = {}
        for k, v in value.items():
            # Only str keys: 1 and "1" would otherwise render to the same key
            if not isinstance(k, str):
                raise CanonicalizationException(
                    message=f"Object keys must be str, got {type(k).__name__}",
                    details={"path": path, "key": repr(k), "type": type(k).__name__},
                )
            if v is not None:
                canonical[k] = canonicalize_value(v, f"{path}.{k}" if path else k)
        return canonical

    if isinstance(value, (list, tuple)):
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    The output has sorted keys, no extra whitespace, no None fields,
    datetimes as ISO-8601 UTC with Z suffix, enums as their values and
    bytes as lowercase hex.

    Raises:
        CanonicalizationException: If serialization fails.

    Example:
        >>> from datetime import datetime
        >>> dumps_canonical({"b": 2, "a": 1, "t": datetime(2026, 1, 27, 21, 35)})
        '{"a":1,"b":2,"t":"2026-01-27T21:35:00Z"}'
    """
    try:
        canonicalized = canonicalize_value(obj)
        return json.dumps(
            canonicalized,
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
        )
    except CanonicalizationException:
        raise
    except (TypeError, ValueError) as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e
