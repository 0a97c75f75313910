from __future__ import annotations

from typing import Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]:
        """All projects ordered by name."""

        raise NotImplementedError

    def create(self, name: str) -> int:
        raise NotImplementedError

    def toggle(self, project_id: int) -> bool:
        raise NotImplementedError

    def delete(self, project_id: int) -> bool:
        raise NotImplementedError
