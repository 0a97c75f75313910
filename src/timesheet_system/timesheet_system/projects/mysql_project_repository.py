from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Project
from .repository import ProjectRepository


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, is_active, created_at FROM projects ORDER BY name")
            return [
                Project(
                    project_id=int(r["id"]),
                    name=r["name"],
                    is_active=bool(r.get("is_active", 1)),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def create(self, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO projects (name) VALUES (%s)", (name,))
            return int(cur.lastrowid)

    def toggle(self, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE projects SET is_active = NOT is_active WHERE id=%s", (int(project_id),))
            return cur.rowcount > 0

    def delete(self, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE id=%s", (int(project_id),))
            return cur.rowcount > 0
