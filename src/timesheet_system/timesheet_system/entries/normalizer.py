from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..categories.schema import DEFAULT_SCHEMA, CategorySchema
from ..common.datetime_utils import require_iso_date
from ..common.validators import coerce_hours, require_user_id
from .budget.base import BudgetPolicy
from .budget.two_tier_policy import TwoTierBudgetPolicy
from .model import NormalizedEntry


class EntryNormalizer:
    """Turns raw per-category input into a validated `NormalizedEntry`.

    Only identity and date are validated. Hour values never fail: anything
    unparseable becomes 0 and negative values pass through, so an overrun
    shows up as a negative (or zero) `available_hours` for the caller to act on.
    """

    def __init__(self, schema: CategorySchema = DEFAULT_SCHEMA, policy: Optional[BudgetPolicy] = None):
        self._schema = schema
        self._policy = policy or TwoTierBudgetPolicy()

    @property
    def schema(self) -> CategorySchema:
        return self._schema

    @property
    def policy(self) -> BudgetPolicy:
        return self._policy

    def normalize(self, raw: Mapping[str, Any]) -> NormalizedEntry:
        user_id = require_user_id(raw.get("userId", raw.get("user_id")))
        work_date = require_iso_date(raw.get("date"))

        remarks = raw.get("remarks")
        hours = {key: coerce_hours(raw.get(key)) for key in self._schema.keys}
        return self.from_hours(
            user_id=user_id,
            work_date=work_date,
            hours=hours,
            remarks=str(remarks).strip() if remarks is not None else "",
        )

    def from_hours(
        self,
        *,
        user_id: int,
        work_date: date,
        hours: Mapping[str, Any],
        remarks: str = "",
        created_at: Optional[datetime] = None,
        available_hours: Optional[float] = None,
    ) -> NormalizedEntry:
        """Build an entry from stored or coerced hours.

        `available_hours` is recomputed unless a stored figure is passed in.
        """
        full = {key: coerce_hours(hours.get(key)) for key in self._schema.keys}
        billable = self._schema.billable_total(full)
        other = self._schema.other_total(full)
        grand = billable + other
        if available_hours is None:
            available_hours = self._policy.available_hours(grand)

        return NormalizedEntry(
            user_id=int(user_id),
            work_date=work_date,
            hours=full,
            remarks=remarks or "",
            billable_total=billable,
            other_total=other,
            grand_total=grand,
            available_hours=float(available_hours),
            created_at=created_at,
        )
