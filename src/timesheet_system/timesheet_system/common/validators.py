from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_user_id(value: Any) -> int:
    """User ids are integer keys in the store; accept ints, whole floats and digit strings."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("userId is required")
    if isinstance(value, bool):
        raise ValidationError(f"userId is malformed: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(f"userId is malformed: {value!r}")
    raise ValidationError(f"userId is malformed: {value!r}")


def coerce_hours(value: Any) -> float:
    """Lenient numeric coercion: anything that does not parse counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number
