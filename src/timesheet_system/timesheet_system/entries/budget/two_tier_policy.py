from __future__ import annotations

from ...core.constants import AUTHORITATIVE_FIRST_TIER_HOURS, AUTHORITATIVE_SECOND_TIER_HOURS
from .base import BudgetPolicy


class TwoTierBudgetPolicy(BudgetPolicy):
    """Authoritative rule applied on save.

    Up to the first tier: first_tier - total.
    Past the first tier: second_tier - total, floored at 0.
    The rule is discontinuous at the first tier; both branches are kept as-is.
    """

    def __init__(
        self,
        first_tier: float = AUTHORITATIVE_FIRST_TIER_HOURS,
        second_tier: float = AUTHORITATIVE_SECOND_TIER_HOURS,
    ):
        self.first_tier = float(first_tier)
        self.second_tier = float(second_tier)

    def available_hours(self, grand_total: float) -> float:
        if grand_total <= self.first_tier:
            return self.first_tier - grand_total
        return max(0.0, self.second_tier - grand_total)
