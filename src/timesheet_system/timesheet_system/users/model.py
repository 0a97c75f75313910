from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: an employee who records hours.

    `ps_number` is the external identifier shown in reports and used as the
    distribution filter; `user_id` is the store key.
    """

    user_id: int
    ps_number: str
    name: str
    password_hash: str
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "ps_number": self.ps_number,
            "name": self.name,
            "created_at": self.created_at.isoformat(sep=" ") if self.created_at else None,
        }
