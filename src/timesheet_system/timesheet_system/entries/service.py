from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional

from .budget.base import BudgetPolicy
from .budget.single_tier_policy import SingleTierBudgetPolicy
from .model import EntryPreview, NormalizedEntry
from .normalizer import EntryNormalizer
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


class TimeEntryService:
    """Use cases: save, look up and list daily time entries."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        normalizer: Optional[EntryNormalizer] = None,
        *,
        advisory_policy: Optional[BudgetPolicy] = None,
    ):
        self._entries = entries
        self._normalizer = normalizer or EntryNormalizer()
        self._advisory = advisory_policy or SingleTierBudgetPolicy()

    def save(self, raw: Mapping[str, Any]) -> NormalizedEntry:
        """Normalize and upsert. Over budget is a valid result, not an error."""

        entry = self._normalizer.normalize(raw)
        logger.info("Saving time entry user_id=%s date=%s", entry.user_id, entry.work_date)
        self._entries.upsert(entry)
        if entry.negative_balance:
            logger.warning(
                "Time entry over budget user_id=%s date=%s available_hours=%s",
                entry.user_id,
                entry.work_date,
                entry.available_hours,
            )
        return entry

    def preview(self, raw: Mapping[str, Any]) -> EntryPreview:
        entry = self._normalizer.normalize(raw)
        advisory = self._advisory.available_hours(entry.grand_total)
        return EntryPreview(
            entry=entry,
            advisory_available_hours=advisory,
            advisory_over_budget=advisory < 0,
        )

    def get_entry(self, user_id: int, work_date: date) -> Optional[NormalizedEntry]:
        return self._entries.get_for_user_and_date(int(user_id), work_date)

    def list_entries(self, user_id: int) -> list[NormalizedEntry]:
        return list(self._entries.list_for_user(int(user_id)))
