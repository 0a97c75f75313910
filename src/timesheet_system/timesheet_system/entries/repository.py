from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import NormalizedEntry
from ..reports.model import UserEntry


class TimeEntryRepository(Protocol):
    """Persistence boundary for time entries.

    Implementations keep at most one row per (user_id, work_date) and raise
    `PersistenceError` on store failures. Absence is `None`/empty, not an error.
    """

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[NormalizedEntry]:
        raise NotImplementedError

    def upsert(self, entry: NormalizedEntry) -> None:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[NormalizedEntry]:
        """Entries for one user, newest date first."""

        raise NotImplementedError

    def list_all_joined(self) -> Sequence[UserEntry]:
        """Every user joined with their entries (None for users with none),
        ordered by user name then date descending."""

        raise NotImplementedError

    def delete_for_user(self, user_id: int) -> int:
        raise NotImplementedError
