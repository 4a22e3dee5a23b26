"""
Schemas & Canonicalization
File: canonical.py

Purpose: Deterministic serialization of leaf values and node pairs
before they are handed to a digest function.

CRITICAL: All outputs from this module MUST be deterministic across runs.
Arrays keep their order, so [a, b] and [b, a] never serialize alike.
"""

import json
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure a datetime is timezone-aware and in UTC.

    Rules:
        - If naive (no tzinfo): treat as UTC
        - If aware: convert to UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime_canonical(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 with Z suffix for UTC.

    Args:
        dt: A datetime object.

    Returns:
        ISO-8601 formatted string with Z suffix (e.g., "2026-01-27T21:35:00Z").
    """
    utc_dt = ensure_utc(dt)
    if utc_dt.microsecond == 0:
        return utc_dt.strftime("%Y-%m-%dT%H:%M:%SZ")
    return utc_dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _validate_float(value: float, path: str = "") -> None:
    """Reject NaN and Infinity, which have no JSON representation."""
    if not math.isfinite(value):
        raise CanonicalizationException(
            message=f"Non-finite float value encountered: {value}",
            details={"path": path, "value": str(value)},
        )


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively canonicalize a value for deterministic JSON serialization.

    Args:
        value: Any Python value to canonicalize.
        path: Current path for error reporting.

    Returns:
        A JSON-serializable canonical representation.

    Raises:
        CanonicalizationException: If the value cannot be canonicalized
            (NaN/Infinity floats, unsupported types, colliding dict keys).
    """
    if value is None:
        return None

    if isinstance(value, bool):
        # Must check bool before int since bool is subclass of int
        return value

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        _validate_float(value, path)
        # 1.0 and 1 are the same number
        return int(value) if value.is_integer() else value

    if isinstance(value, str):
        return value

    if isinstance(value, datetime):
        return format_datetime_canonical(value)

    if isinstance(value, Enum):
        return canonicalize_value(value.value, path)

    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="json", by_alias=True)
        return canonicalize_value(dumped, path)

    if isinstance(value, dict):
        # Keys are sorted during JSON serialization; null values are kept
        # so that {"a": null} and {} hash differently
        result: dict[str, Any] = {}
        for k, v in value.items():
            key = _canonical_key(k, path)
            if key in result:
                raise CanonicalizationException(
                    message=f"Dict keys collide after conversion to string: {key!r}",
                    details={"path": path, "key": key},
                )
            result[key] = canonicalize_value(v, f"{path}.{key}" if path else key)
        return result

    if isinstance(value, (list, tuple)):
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if isinstance(value, (set, frozenset)):
        # Unordered: order members by their own canonical form
        items = [canonicalize_value(item, f"{path}{{}}") for item in value]
        return sorted(items, key=_dumps)

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def _canonical_key(key: Any, path: str) -> str:
    """Dict keys must be strings or ints (enums by their value)."""
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise CanonicalizationException(
            message=f"Cannot use dict key of type {type(key).__name__}",
            details={"path": path, "type": type(key).__name__},
        )
    return str(key)


def _dumps(canonicalized: Any) -> str:
    return json.dumps(
        canonicalized,
        sort_keys=True,
        separators=CANONICAL_JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Returns:
        A canonical JSON string with:
            - Sorted keys
            - No extra whitespace
            - Datetimes as ISO-8601 with Z suffix
            - Enums as their values
            - No NaN/Infinity floats

    Raises:
        CanonicalizationException: If serialization fails.

    Example:
        >>> dumps_canonical([1, 2])
        '[1,2]'
        >>> dumps_canonical({"b": 2, "a": 1})
        '{"a":1,"b":2}'
    """
    try:
        return _dumps(canonicalize_value(obj))
    except CanonicalizationException:
        raise
    except Exception as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def loads_canonical(json_str: str) -> Any:
    """
    Parse a canonical JSON string.

    Datetimes and bytes are not restored; they stay strings.
    """
    return json.loads(json_str)


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """Check if two objects have identical canonical representations."""
    try:
        return dumps_canonical(obj1) == dumps_canonical(obj2)
    except CanonicalizationException:
        return False
