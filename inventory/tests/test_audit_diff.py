"""
Tests for field-level snapshot diffing
"""
from inventory.services.audit_service import diff_snapshots, BOOKKEEPING_FIELDS


def test_identical_snapshots_produce_no_changes():
    snap = {"name": "Laptop", "status": "ACTIVE", "specs": {"ram": "16GB", "cpu": "i7"}}
    changes = diff_snapshots(snap, dict(snap))
    assert changes.old_values == {}
    assert changes.new_values == {}


def test_single_field_change():
    old = {"name": "Laptop", "status": "ACTIVE"}
    new = {"name": "Laptop", "status": "RETIRED"}
    changes = diff_snapshots(old, new)
    assert changes.old_values == {"status": "ACTIVE"}
    assert changes.new_values == {"status": "RETIRED"}


def test_bookkeeping_fields_are_ignored():
    old = {"id": "1", "createdAt": "2024-01-01T00:00:00", "updatedAt": "2024-01-01T00:00:00", "name": "A"}
    new = {"id": "2", "createdAt": "2024-02-01T00:00:00", "updatedAt": "2024-02-02T00:00:00", "name": "A"}
    changes = diff_snapshots(old, new)
    assert changes.old_values == {}
    assert changes.new_values == {}


def test_snake_case_bookkeeping_fields_are_ignored():
    assert {"created_at", "updated_at"} <= BOOKKEEPING_FIELDS
    changes = diff_snapshots({"created_at": "x", "a": 1}, {"created_at": "y", "a": 2})
    assert changes.old_values == {"a": 1}
    assert changes.new_values == {"a": 2}


def test_added_field_reported_only_on_new_side():
    changes = diff_snapshots({"a": 1}, {"a": 1, "b": 2})
    assert changes.old_values == {}
    assert changes.new_values == {"b": 2}


def test_removed_field_reported_only_on_old_side():
    changes = diff_snapshots({"a": 1, "b": 2}, {"a": 1})
    assert changes.old_values == {"b": 2}
    assert changes.new_values == {}


def test_null_old_snapshot_reports_whole_new_snapshot():
    new = {"id": "abc", "name": "Laptop", "status": "ACTIVE"}
    changes = diff_snapshots(None, new)
    assert changes.old_values == {}
    assert changes.new_values == new


def test_empty_old_snapshot_is_diffed_normally():
    changes = diff_snapshots({}, {"id": "abc", "name": "Laptop"})
    assert changes.old_values == {}
    assert changes.new_values == {"name": "Laptop"}


def test_null_and_missing_are_different():
    changes = diff_snapshots({"remarks": None}, {})
    assert changes.old_values == {"remarks": None}
    assert changes.new_values == {}

    changes = diff_snapshots({}, {"remarks": None})
    assert changes.old_values == {}
    assert changes.new_values == {"remarks": None}


def test_value_to_null_is_a_change():
    changes = diff_snapshots({"remarks": "old"}, {"remarks": None})
    assert changes.old_values == {"remarks": "old"}
    assert changes.new_values == {"remarks": None}


def test_nested_mapping_key_order_does_not_matter():
    old = {"specs": {"ram": "16GB", "cpu": "i7"}}
    new = {"specs": {"cpu": "i7", "ram": "16GB"}}
    changes = diff_snapshots(old, new)
    assert changes.old_values == {}
    assert changes.new_values == {}


def test_nested_value_change_reports_whole_field():
    old = {"specs": {"ram": "16GB", "cpu": "i7"}}
    new = {"specs": {"ram": "32GB", "cpu": "i7"}}
    changes = diff_snapshots(old, new)
    assert changes.old_values == {"specs": {"ram": "16GB", "cpu": "i7"}}
    assert changes.new_values == {"specs": {"ram": "32GB", "cpu": "i7"}}


def test_type_changes_are_changes():
    changes = diff_snapshots({"qty": 5, "flag": True}, {"qty": "5", "flag": 1})
    assert changes.old_values == {"qty": 5, "flag": True}
    assert changes.new_values == {"qty": "5", "flag": 1}


def test_int_and_float_with_same_value_are_equal():
    changes = diff_snapshots({"price": 5}, {"price": 5.0})
    assert changes.old_values == {}
    assert changes.new_values == {}


def test_list_order_matters():
    changes = diff_snapshots({"tags": ["a", "b"]}, {"tags": ["b", "a"]})
    assert changes.old_values == {"tags": ["a", "b"]}
    assert changes.new_values == {"tags": ["b", "a"]}


def test_dates_compare_by_serialized_value():
    from datetime import date
    changes = diff_snapshots({"d": date(2024, 1, 1)}, {"d": "2024-01-01"})
    assert changes.old_values == {}
    assert changes.new_values == {}
