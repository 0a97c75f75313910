from __future__ import annotations

from enum import Enum


class CategoryGroup(str, Enum):
    """Which daily total a category contributes to."""

    BILLABLE = "billable"
    OTHER = "other"


class BalanceState(str, Enum):
    """Classification of an available-hours figure for display."""

    OVER = "over"
    EXHAUSTED = "exhausted"
    OK = "ok"

    @classmethod
    def of(cls, available_hours: float) -> "BalanceState":
        if available_hours < 0:
            return cls.OVER
        if available_hours == 0:
            return cls.EXHAUSTED
        return cls.OK
