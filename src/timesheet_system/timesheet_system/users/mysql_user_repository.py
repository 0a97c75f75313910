from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        ps_number=row["ps_number"],
        name=row.get("name") or "",
        password_hash=row.get("password") or "",
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, ps_number, password, name, created_at FROM users WHERE id=%s",
                (user_id,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_ps_number(self, ps_number: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, ps_number, password, name, created_at FROM users WHERE ps_number=%s",
                (ps_number,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, ps_number: str, name: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO users(ps_number, password, name) VALUES(%s,%s,%s)",
                (ps_number, password_hash, name),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, ps_number, password, name, created_at FROM users ORDER BY name")
            return [_to_user(r) for r in fetchall(cur)]
