from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import BalanceState


@dataclass(frozen=True)
class NormalizedEntry:
    """Domain entity: one user's hours for one calendar date.

    `hours` holds every schema category. The totals and `available_hours`
    are derived on save and never taken from the caller.
    """

    user_id: int
    work_date: date
    hours: dict[str, float]
    remarks: str
    billable_total: float
    other_total: float
    grand_total: float
    available_hours: float
    created_at: Optional[datetime] = None

    def hours_for(self, key: str) -> float:
        return float(self.hours.get(key, 0.0))

    @property
    def negative_balance(self) -> bool:
        return self.available_hours < 0

    def to_dict(self) -> dict:
        data: dict = {
            "user_id": self.user_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
        }
        data.update(self.hours)
        data.update(
            {
                "remarks": self.remarks,
                "billable_total": self.billable_total,
                "other_total": self.other_total,
                "grand_total": self.grand_total,
                "available_hours": self.available_hours,
                "created_at": self.created_at.isoformat(sep=" ") if self.created_at else None,
            }
        )
        return data


@dataclass(frozen=True)
class EntryPreview:
    """Read-model for the dashboard's live totals; nothing is persisted."""

    entry: NormalizedEntry
    advisory_available_hours: float
    advisory_over_budget: bool
    state: BalanceState = field(init=False)
    advisory_state: BalanceState = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "state", BalanceState.of(self.entry.available_hours))
        object.__setattr__(self, "advisory_state", BalanceState.of(self.advisory_available_hours))

    def to_dict(self) -> dict:
        return {
            "billable_total": self.entry.billable_total,
            "other_total": self.entry.other_total,
            "grand_total": self.entry.grand_total,
            "available_hours": self.entry.available_hours,
            "state": self.state.value,
            "advisory_available_hours": self.advisory_available_hours,
            "advisory_state": self.advisory_state.value,
            "advisory_over_budget": self.advisory_over_budget,
        }
