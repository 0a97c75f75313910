from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Project
from .repository import ProjectRepository


class ProjectService:
    """Use case: maintain the project catalog (admin)."""

    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self) -> list[Project]:
        return list(self._projects.list_all())

    def list_active_categories(self) -> list[Project]:
        return [p for p in self._projects.list_all() if p.is_active]

    def add_project(self, name: str) -> int:
        name = require_non_empty(name, "Project name")
        return self._projects.create(name)

    def toggle_project(self, project_id: int) -> None:
        if not self._projects.toggle(int(project_id)):
            raise NotFoundError("Project not found")

    def delete_project(self, project_id: int) -> None:
        if not self._projects.delete(int(project_id)):
            raise NotFoundError("Project not found")
