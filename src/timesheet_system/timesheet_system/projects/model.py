from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Project:
    """Catalog entry shown to users. Toggling it never touches stored hours."""

    project_id: int
    name: str
    is_active: bool = True
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.project_id,
            "name": self.name,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(sep=" ") if self.created_at else None,
        }
