"""
Tests for timestamp and JSON helpers
"""
import json
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from smartbizflow.models import LeaveStatus
from smartbizflow.utils.datetime_utils import iso_8601_utc, next_timestamp, now_utc, parse_iso
from smartbizflow.utils.json_serializer import dumps_opaque, to_json_safe


def test_iso_8601_utc_converts_offsets():
    ist = timezone(timedelta(hours=5, minutes=30))
    assert iso_8601_utc(datetime(2024, 1, 1, 5, 30, tzinfo=ist)) == "2024-01-01T00:00:00.000000Z"


def test_parse_iso_accepts_dates_and_z_suffix():
    assert parse_iso("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert parse_iso("2024-01-01T10:00:00.000000Z") == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_iso(None) is None


def test_next_timestamp_is_strictly_after_previous():
    future = iso_8601_utc(now_utc() + timedelta(hours=1))
    bumped = next_timestamp(future)
    assert bumped > future
    assert parse_iso(bumped) - parse_iso(future) == timedelta(microseconds=1)


def test_next_timestamp_ignores_garbage_previous():
    assert next_timestamp("not a timestamp")


def test_to_json_safe():
    value = {
        "status": LeaveStatus.APPROVED,
        "day": date(2024, 2, 29),
        "amount": Decimal("10.50"),
        "tags": ("a", "b"),
    }
    assert to_json_safe(value) == {
        "status": "APPROVED",
        "day": "2024-02-29",
        "amount": 10.5,
        "tags": ["a", "b"],
    }


def test_dumps_opaque():
    assert dumps_opaque(None) is None
    assert dumps_opaque("already text") == "already text"
    assert json.loads(dumps_opaque({"b": 1, "a": LeaveStatus.PENDING})) == {"a": "PENDING", "b": 1}
