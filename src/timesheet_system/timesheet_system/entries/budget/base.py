from __future__ import annotations

from abc import ABC, abstractmethod


class BudgetPolicy(ABC):
    """Budget interface (Strategy Pattern for the daily hour ceiling)."""

    @abstractmethod
    def available_hours(self, grand_total: float) -> float:
        raise NotImplementedError

    def is_over_budget(self, grand_total: float) -> bool:
        return self.available_hours(grand_total) < 0
