"""The fixed, ordered set of hour categories.

Built once at import time and shared by the normalizer, the report engine,
the exporter and the MySQL repository. Adding or removing a category here
requires a matching change to `database/schema.sql`.
"""
from __future__ import annotations

from typing import Iterator, Mapping, Optional, Sequence

from ..core.enums import CategoryGroup
from .model import Category


class CategorySchema:
    def __init__(self, categories: Sequence[Category]):
        seen: set[str] = set()
        for c in categories:
            if c.key in seen:
                raise ValueError(f"Duplicate category key: {c.key}")
            seen.add(c.key)
        self._categories = tuple(categories)
        self._by_key = {c.key: c for c in self._categories}

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Optional[Category]:
        return self._by_key.get(key)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self._categories)

    @property
    def billable_keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self._categories if c.group == CategoryGroup.BILLABLE)

    @property
    def other_keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self._categories if c.group == CategoryGroup.OTHER)

    def billable_total(self, hours: Mapping[str, float]) -> float:
        return sum((float(hours.get(k) or 0) for k in self.billable_keys), 0.0)

    def other_total(self, hours: Mapping[str, float]) -> float:
        return sum((float(hours.get(k) or 0) for k in self.other_keys), 0.0)

    def zeroes(self) -> dict[str, float]:
        return {k: 0.0 for k in self.keys}


def _billable(key: str, label: str) -> Category:
    return Category(key=key, label=label, group=CategoryGroup.BILLABLE)


def _other(key: str, label: str) -> Category:
    return Category(key=key, label=label, group=CategoryGroup.OTHER)


DEFAULT_SCHEMA = CategorySchema(
    [
        _billable("komatsu", "Komatsu"),
        _billable("brunswick", "Brunswick"),
        _billable("abb_india", "ABB India"),
        _billable("omnion", "Omnion"),
        _billable("rinnai", "Rinnai"),
        _billable("oshkosh", "Oshkosh"),
        _billable("polaris", "Polaris"),
        _billable("volvo", "Volvo"),
        _billable("bridgestone", "Bridgestone"),
        _billable("wartsila_uk", "Wartsila UK"),
        _billable("mtu", "MTU"),
        _billable("mhi", "MHI"),
        _other("free_hours", "Free Hours"),
        _other("non_billable_hours", "Non-Billable Hours"),
        _other("training_hours", "Training Hours"),
    ]
)
