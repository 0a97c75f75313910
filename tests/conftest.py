from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.timesheet_system.timesheet_system.container import wire_services
from src.timesheet_system.timesheet_system.core.exceptions import PersistenceError
from src.timesheet_system.timesheet_system.entries.model import NormalizedEntry
from src.timesheet_system.timesheet_system.entries.normalizer import EntryNormalizer
from src.timesheet_system.timesheet_system.projects.model import Project
from src.timesheet_system.timesheet_system.reports.model import UserEntry
from src.timesheet_system.timesheet_system.users.model import User

ADMIN_PASSWORD = "admin-test"


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def add(self, ps_number: str, name: str, password_hash: str = "x") -> User:
        self._id += 1
        user = User(user_id=self._id, ps_number=ps_number, name=name, password_hash=password_hash)
        self._by_id[user.user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_ps_number(self, ps_number: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.ps_number == ps_number), None)

    def create_user(self, *, ps_number: str, name: str, password_hash: str) -> int:
        return self.add(ps_number, name, password_hash).user_id

    def delete_by_id(self, user_id: int) -> bool:
        return self._by_id.pop(user_id, None) is not None

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda u: u.name)


class InMemoryTimeEntries:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self._by_user_date: dict[tuple[int, date], NormalizedEntry] = {}

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[NormalizedEntry]:
        return self._by_user_date.get((user_id, work_date))

    def upsert(self, entry: NormalizedEntry) -> None:
        self._by_user_date[(entry.user_id, entry.work_date)] = entry

    def list_for_user(self, user_id: int):
        items = [e for e in self._by_user_date.values() if e.user_id == user_id]
        items.sort(key=lambda e: e.work_date, reverse=True)
        return items

    def list_all_joined(self):
        rows = []
        for u in self._users.list_all():
            entries = self.list_for_user(u.user_id)
            if not entries:
                rows.append(UserEntry(user_id=u.user_id, user_name=u.name, ps_number=u.ps_number))
            for e in entries:
                rows.append(UserEntry(user_id=u.user_id, user_name=u.name, ps_number=u.ps_number, entry=e))
        return rows

    def delete_for_user(self, user_id: int) -> int:
        keys = [k for k in self._by_user_date if k[0] == user_id]
        for k in keys:
            del self._by_user_date[k]
        return len(keys)

    def count(self) -> int:
        return len(self._by_user_date)


class InMemoryProjects:
    def __init__(self):
        self._by_id: dict[int, Project] = {}
        self._id = 0

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda p: p.name)

    def create(self, name: str) -> int:
        self._id += 1
        self._by_id[self._id] = Project(project_id=self._id, name=name, is_active=True, created_at=datetime(2024, 1, 1))
        return self._id

    def toggle(self, project_id: int) -> bool:
        p = self._by_id.get(project_id)
        if not p:
            return False
        self._by_id[project_id] = Project(project_id=p.project_id, name=p.name, is_active=not p.is_active, created_at=p.created_at)
        return True

    def delete(self, project_id: int) -> bool:
        return self._by_id.pop(project_id, None) is not None


@pytest.fixture
def normalizer() -> EntryNormalizer:
    return EntryNormalizer()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def entries_repo(users_repo) -> InMemoryTimeEntries:
    return InMemoryTimeEntries(users_repo)


@pytest.fixture
def projects_repo() -> InMemoryProjects:
    return InMemoryProjects()


@pytest.fixture
def container(users_repo, entries_repo, projects_repo, normalizer):
    return wire_services(
        entries_repo=entries_repo,
        users_repo=users_repo,
        projects_repo=projects_repo,
        normalizer=normalizer,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(container, monkeypatch):
    from src.timesheet_system.timesheet_system.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    response = client.post("/admin-login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


class BrokenTimeEntries(InMemoryTimeEntries):
    """Entries store whose every write and report read fails like a dropped connection."""

    def upsert(self, entry: NormalizedEntry) -> None:
        raise PersistenceError("Database error: 2013 Lost connection")

    def list_all_joined(self):
        raise PersistenceError("Database error: 2013 Lost connection")


@pytest.fixture
def broken_client(users_repo, projects_repo, normalizer, monkeypatch):
    from src.timesheet_system.timesheet_system.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    container = wire_services(
        entries_repo=BrokenTimeEntries(users_repo),
        users_repo=users_repo,
        projects_repo=projects_repo,
        normalizer=normalizer,
        admin_password=ADMIN_PASSWORD,
    )
    return create_app(container).test_client()
