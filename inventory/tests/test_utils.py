"""
Tests for serialization and datetime helpers
"""
from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest

from inventory.models.system import SystemStatus
from inventory.utils.datetime_utils import parse_range_bound, ensure_utc
from inventory.utils.json_serializer import to_json_safe, json_equal


def test_to_json_safe_converts_nested_values():
    value = {
        "status": SystemStatus.ACTIVE,
        "bought": date(2024, 1, 2),
        "price": Decimal("10.50"),
        "tags": ("a", "b"),
        1: None,
    }
    assert to_json_safe(value) == {
        "status": "ACTIVE",
        "bought": "2024-01-02",
        "price": 10.5,
        "tags": ["a", "b"],
        "1": None,
    }


def test_json_equal():
    assert json_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1.0})
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert not json_equal("5", 5)
    assert not json_equal({"a": 1}, {"a": 1, "b": None})
    assert json_equal(None, None)


def test_parse_range_bound_date_only():
    start = parse_range_bound("2024-01-10")
    end = parse_range_bound("2024-01-10", end_of_day=True)
    assert start == datetime(2024, 1, 10, tzinfo=timezone.utc)
    assert end == datetime.combine(date(2024, 1, 10), time.max, tzinfo=timezone.utc)


def test_parse_range_bound_datetime_converted_to_utc():
    value = parse_range_bound("2024-01-10T05:30:00+05:30")
    assert value == datetime(2024, 1, 10, 0, 0, tzinfo=timezone.utc)


def test_parse_range_bound_accepts_z_suffix():
    assert parse_range_bound("2024-01-10T00:00:00Z") == datetime(2024, 1, 10, tzinfo=timezone.utc)
    assert parse_range_bound("2024-01-10T18:30:00.000Z", end_of_day=True) == datetime(
        2024, 1, 10, 18, 30, tzinfo=timezone.utc
    )


def test_parse_range_bound_empty():
    assert parse_range_bound(None) is None
    assert parse_range_bound("") is None


def test_parse_range_bound_invalid():
    with pytest.raises(ValueError):
        parse_range_bound("last tuesday")


def test_ensure_utc_treats_naive_as_utc():
    assert ensure_utc(datetime(2024, 1, 1, 12, 0)).tzinfo == timezone.utc


def test_blank_actor_header_falls_back_to_default(client, db):
    from inventory.models.audit_log import AuditLog

    response = client.post(
        "/api/v1/masters/vendors",
        json={"name": "HP India"},
        headers={"X-Actor": "   "},
    )
    assert response.status_code == 201
    assert db.query(AuditLog).one().performed_by == "Admin"


def test_validation_error_shape(client):
    response = client.post("/api/v1/systems", json={})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] is True
    assert body["path"] == "/api/v1/systems"
    assert isinstance(body["errors"], list)


def test_format_cell():
    from inventory.utils.csv_export import format_cell

    assert format_cell(None) == ""
    assert format_cell(True) == "Yes"
    assert format_cell(False) == "No"
    assert format_cell(date(2024, 5, 1)) == "2024-05-01"
    assert format_cell(datetime(2024, 5, 1, 0, 0, tzinfo=timezone.utc)) == "2024-05-01T05:30:00+05:30"
    assert format_cell(12.5) == "12.5"
