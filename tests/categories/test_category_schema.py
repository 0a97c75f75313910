import pytest

from src.timesheet_system.timesheet_system.categories.model import Category
from src.timesheet_system.timesheet_system.categories.schema import DEFAULT_SCHEMA, CategorySchema
from src.timesheet_system.timesheet_system.core.enums import CategoryGroup


def test_default_schema_groups_and_order():
    assert len(DEFAULT_SCHEMA.billable_keys) == 12
    assert DEFAULT_SCHEMA.billable_keys[0] == "komatsu"
    assert DEFAULT_SCHEMA.billable_keys[-1] == "mhi"
    assert DEFAULT_SCHEMA.other_keys == ("free_hours", "non_billable_hours", "training_hours")
    assert DEFAULT_SCHEMA.keys == DEFAULT_SCHEMA.billable_keys + DEFAULT_SCHEMA.other_keys


def test_duplicate_keys_rejected():
    with pytest.raises(ValueError):
        CategorySchema(
            [
                Category("komatsu", "Komatsu", CategoryGroup.BILLABLE),
                Category("komatsu", "Komatsu again", CategoryGroup.OTHER),
            ]
        )


def test_group_totals_ignore_missing_keys():
    hours = {"komatsu": 2.0, "volvo": 1.5, "training_hours": 0.5}

    assert DEFAULT_SCHEMA.billable_total(hours) == 3.5
    assert DEFAULT_SCHEMA.other_total(hours) == 0.5
    assert "komatsu" in DEFAULT_SCHEMA
    assert DEFAULT_SCHEMA.get("unknown") is None
