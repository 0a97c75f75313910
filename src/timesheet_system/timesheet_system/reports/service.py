from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..categories.schema import DEFAULT_SCHEMA, CategorySchema
from ..entries.repository import TimeEntryRepository
from .model import ReportRow, UserAggregate, UserEntry

logger = logging.getLogger(__name__)


class ReportService:
    """Rolls persisted entries up into per-user distributions and flat rows.

    `aggregate_by_user` and `render_flat_report` are pure transforms over the
    users ⟕ entries join; the `build_*` methods read that join from the store.
    """

    def __init__(self, entries: TimeEntryRepository, *, schema: CategorySchema = DEFAULT_SCHEMA):
        self._entries = entries
        self._schema = schema

    def aggregate_by_user(
        self,
        joined: Sequence[UserEntry],
        user_filter: Optional[str] = None,
    ) -> list[UserAggregate]:
        if user_filter:
            joined = [r for r in joined if r.ps_number == user_filter]

        summary_map: dict[int, dict] = {}
        for r in joined:
            s = summary_map.get(r.user_id)
            if not s:
                s = {
                    "user_id": r.user_id,
                    "user_name": r.user_name,
                    "ps_number": r.ps_number,
                    "totals": self._schema.zeroes(),
                    "entry_count": 0,
                }
                summary_map[r.user_id] = s

            if r.entry is None:
                continue
            for key in self._schema.keys:
                s["totals"][key] += r.entry.hours_for(key)
            s["entry_count"] += 1

        summary = [UserAggregate(**s) for s in summary_map.values()]
        # list.sort is stable: equal names keep first-seen order.
        summary.sort(key=lambda a: a.user_name or "")
        return summary

    def render_flat_report(self, joined: Sequence[UserEntry]) -> list[ReportRow]:
        rows: list[ReportRow] = []
        for r in joined:
            e = r.entry
            if e is None:
                rows.append(
                    ReportRow(
                        user_id=r.user_id,
                        user_name=r.user_name,
                        ps_number=r.ps_number,
                        work_date=None,
                        hours={key: None for key in self._schema.keys},
                    )
                )
                continue

            rows.append(
                ReportRow(
                    user_id=r.user_id,
                    user_name=r.user_name,
                    ps_number=r.ps_number,
                    work_date=e.work_date,
                    hours={key: e.hours_for(key) for key in self._schema.keys},
                    available_hours=e.available_hours,
                    remarks=e.remarks,
                    created_at=e.created_at,
                    negative_balance=e.available_hours < 0,
                )
            )
        return rows

    def build_distribution(self, user_filter: Optional[str] = None) -> list[UserAggregate]:
        return self.aggregate_by_user(self._entries.list_all_joined(), user_filter)

    def build_flat_report(self) -> list[ReportRow]:
        rows = self.render_flat_report(self._entries.list_all_joined())
        logger.debug("Built flat report rows=%d", len(rows))
        return rows
