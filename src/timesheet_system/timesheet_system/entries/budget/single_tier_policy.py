from __future__ import annotations

from ...core.constants import ADVISORY_DAILY_HOURS
from .base import BudgetPolicy


class SingleTierBudgetPolicy(BudgetPolicy):
    """Advisory rule used for the early warning before a save: ceiling - total."""

    def __init__(self, ceiling: float = ADVISORY_DAILY_HOURS):
        self.ceiling = float(ceiling)

    def available_hours(self, grand_total: float) -> float:
        return self.ceiling - grand_total
