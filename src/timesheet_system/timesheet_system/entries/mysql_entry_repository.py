from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..reports.model import UserEntry
from .model import NormalizedEntry
from .normalizer import EntryNormalizer
from .repository import TimeEntryRepository


class MySQLTimeEntryRepository(TimeEntryRepository):
    """time_entries table; one column per schema category, unique (user_id, work_date)."""

    def __init__(self, conn_factory: DatabaseConnection, normalizer: EntryNormalizer):
        self._conn_factory = conn_factory
        self._normalizer = normalizer
        self._columns = normalizer.schema.keys

    def _entry_select(self, alias: str = "te") -> str:
        cols = ", ".join(f"{alias}.`{c}`" for c in self._columns)
        return (
            f"{alias}.user_id, {alias}.work_date, {cols}, "
            f"{alias}.remarks, {alias}.available_hours, {alias}.created_at"
        )

    def _to_entry(self, r: dict) -> NormalizedEntry:
        return self._normalizer.from_hours(
            user_id=int(r["user_id"]),
            work_date=r["work_date"],
            hours={c: r.get(c) for c in self._columns},
            remarks=r.get("remarks") or "",
            created_at=r.get("created_at"),
            available_hours=float(r["available_hours"]),
        )

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[NormalizedEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {self._entry_select()}
                FROM time_entries te
                WHERE te.user_id=%s AND te.work_date=%s
                """,
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return self._to_entry(r) if r else None

    def upsert(self, entry: NormalizedEntry) -> None:
        cols = ["user_id", "work_date", *self._columns, "remarks", "available_hours"]
        placeholders = ",".join(["%s"] * len(cols))
        updates = ", ".join(f"`{c}`=VALUES(`{c}`)" for c in cols[2:])
        params = (
            entry.user_id,
            entry.work_date,
            *(entry.hours_for(c) for c in self._columns),
            entry.remarks,
            entry.available_hours,
        )

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO time_entries ({", ".join(f"`{c}`" for c in cols)})
                VALUES ({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                params,
            )

    def list_for_user(self, user_id: int) -> Sequence[NormalizedEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {self._entry_select()}
                FROM time_entries te
                WHERE te.user_id=%s
                ORDER BY te.work_date DESC
                """,
                (int(user_id),),
            )
            return [self._to_entry(r) for r in fetchall(cur)]

    def list_all_joined(self) -> Sequence[UserEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    u.id AS joined_user_id, u.name AS user_name, u.ps_number,
                    te.id AS entry_id, {self._entry_select()}
                FROM users u
                LEFT JOIN time_entries te ON te.user_id = u.id
                ORDER BY u.name COLLATE utf8mb4_bin, u.id, te.work_date DESC
                """
            )
            return [
                UserEntry(
                    user_id=int(r["joined_user_id"]),
                    user_name=r.get("user_name") or "",
                    ps_number=r["ps_number"],
                    entry=self._to_entry(r) if r.get("entry_id") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def delete_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE user_id=%s", (int(user_id),))
            return int(cur.rowcount)
