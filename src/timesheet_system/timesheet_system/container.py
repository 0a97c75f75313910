from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .categories.schema import DEFAULT_SCHEMA, CategorySchema
from .core.constants import (
    ADVISORY_DAILY_HOURS,
    AUTHORITATIVE_FIRST_TIER_HOURS,
    AUTHORITATIVE_SECOND_TIER_HOURS,
)
from .database.connection import DBConfig, DatabaseConnection
from .entries.budget.single_tier_policy import SingleTierBudgetPolicy
from .entries.budget.two_tier_policy import TwoTierBudgetPolicy
from .entries.mysql_entry_repository import MySQLTimeEntryRepository
from .entries.normalizer import EntryNormalizer
from .entries.repository import TimeEntryRepository
from .entries.service import TimeEntryService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .reports.excel_exporter import ExcelReportExporter
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    entries_repo: TimeEntryRepository
    users_repo: UserRepository
    projects_repo: ProjectRepository

    time_entry_service: TimeEntryService
    report_service: ReportService
    excel_exporter: ExcelReportExporter
    auth_service: AuthService
    user_service: UserService
    project_service: ProjectService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    entries_repo: TimeEntryRepository,
    users_repo: UserRepository,
    projects_repo: ProjectRepository,
    normalizer: EntryNormalizer,
    admin_password: str,
    advisory_hours: float = ADVISORY_DAILY_HOURS,
    schema: CategorySchema = DEFAULT_SCHEMA,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Compose services over any repository implementations (MySQL or in-memory)."""

    return Container(
        entries_repo=entries_repo,
        users_repo=users_repo,
        projects_repo=projects_repo,
        time_entry_service=TimeEntryService(
            entries_repo,
            normalizer,
            advisory_policy=SingleTierBudgetPolicy(ceiling=advisory_hours),
        ),
        report_service=ReportService(entries_repo, schema=schema),
        excel_exporter=ExcelReportExporter(schema),
        auth_service=AuthService(users_repo, admin_password=admin_password),
        user_service=UserService(users_repo, entries_repo),
        project_service=ProjectService(projects_repo),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    admin_password: str,
    first_tier: float = AUTHORITATIVE_FIRST_TIER_HOURS,
    second_tier: float = AUTHORITATIVE_SECOND_TIER_HOURS,
    advisory_hours: float = ADVISORY_DAILY_HOURS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    normalizer = EntryNormalizer(DEFAULT_SCHEMA, TwoTierBudgetPolicy(first_tier, second_tier))

    return wire_services(
        entries_repo=MySQLTimeEntryRepository(conn, normalizer),
        users_repo=MySQLUserRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        normalizer=normalizer,
        admin_password=admin_password,
        advisory_hours=advisory_hours,
        conn=conn,
    )
