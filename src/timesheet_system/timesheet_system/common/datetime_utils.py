from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value, field_name: str = "date") -> date:
    """Accept a date (not a datetime) or a strict YYYY-MM-DD string."""
    if isinstance(value, datetime):
        raise ValidationError(f"{field_name} must be a calendar date")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)")

