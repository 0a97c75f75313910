from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..entries.model import NormalizedEntry


@dataclass(frozen=True)
class UserEntry:
    """One row of the users ⟕ entries join; `entry` is None for a user with no entries."""

    user_id: int
    user_name: str
    ps_number: str
    entry: Optional[NormalizedEntry] = None


@dataclass(frozen=True)
class UserAggregate:
    """Per-user category sums across all of that user's entries."""

    user_id: int
    user_name: str
    ps_number: str
    totals: dict[str, float]
    entry_count: int = 0

    def to_dict(self) -> dict:
        data: dict = {
            "user_id": self.user_id,
            "user_name": self.user_name,
            "ps_number": self.ps_number,
        }
        data.update(self.totals)
        data["entry_count"] = self.entry_count
        return data


@dataclass(frozen=True)
class ReportRow:
    """Read-model for tabular display and spreadsheet export."""

    user_id: int
    user_name: str
    ps_number: str
    work_date: Optional[date]
    hours: dict[str, Optional[float]] = field(default_factory=dict)
    available_hours: Optional[float] = None
    remarks: str = ""
    created_at: Optional[datetime] = None
    negative_balance: bool = False

    def to_dict(self) -> dict:
        data: dict = {
            "user_id": self.user_id,
            "user_name": self.user_name,
            "ps_number": self.ps_number,
            "date": self.work_date.strftime("%Y-%m-%d") if self.work_date else None,
        }
        data.update(self.hours)
        data.update(
            {
                "available_hours": self.available_hours,
                "remarks": self.remarks,
                "created_at": self.created_at.isoformat(sep=" ") if self.created_at else None,
                "negative_balance": self.negative_balance,
            }
        )
        return data
