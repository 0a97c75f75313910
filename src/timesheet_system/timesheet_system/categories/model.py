from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CategoryGroup


@dataclass(frozen=True)
class Category:
    """One hour bucket of a daily time entry.

    `key` doubles as the persisted column name and the wire field name.
    """

    key: str
    label: str
    group: CategoryGroup
