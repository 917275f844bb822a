"""Timestamp parsing and scalar coercion for loosely-typed upstream values."""

import math
from datetime import UTC, datetime
from typing import Any

from zutool.models.common import Number, Text, TypedScalar

# Tried in order; first match wins.
INSTANT_LAYOUTS = (
    "%Y-%m-%d %H",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y%m%d",
)


class CoercionError(ValueError):
    """Raised when an upstream value has a shape we cannot type."""


def parse_instant(s: str) -> datetime | None:
    """Parse a timestamp in any known layout.

    Zone-less layouts are pinned to UTC so every parsed instant is
    comparable with every other. Returns None when no layout matches.
    """
    if not isinstance(s, str):
        return None
    s = s.strip()
    for layout in INSTANT_LAYOUTS:
        try:
            dt = datetime.strptime(s, layout)
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt
    return None


def coerce_scalar(value: Any) -> TypedScalar:
    """Tag a decoded JSON value as Text or Number."""
    # bool is an int subclass but is never a valid cell value
    if isinstance(value, bool):
        raise CoercionError(f"unsupported value type bool: {value!r}")
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, float)):
        # json.loads accepts NaN and Infinity tokens
        if not math.isfinite(value):
            raise CoercionError(f"non-finite number: {value!r}")
        return Number(float(value))
    raise CoercionError(
        f"unsupported value type {type(value).__name__}: {value!r}"
    )


def to_number(value: Any) -> float | None:
    """Parse a numeric value that may arrive as text.

    None if not numeric. NaN and infinities count as not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None
