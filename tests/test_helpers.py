"""Tests for value parsing and display formatting helpers."""

import math
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from app.utils.helpers import (
    format_currency,
    format_date,
    format_datetime,
    format_list,
    parse_datetime,
    parse_int,
    serialize_doc,
)


@pytest.mark.parametrize("raw,expected", [
    ("25000", 25000),
    (" 1500 INR", 1500),
    ("-20", -20),
    (12, 12),
])
def test_parse_int_reads_leading_digits(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["", "flexible", "INR 1500", None])
def test_parse_int_without_digits_is_nan(raw):
    assert math.isnan(parse_int(raw))


def test_parse_datetime():
    assert parse_datetime("2025-07-15") == datetime(2025, 7, 15)
    assert parse_datetime("2025-07-15T10:30") == datetime(2025, 7, 15, 10, 30)
    assert parse_datetime("") is None
    assert parse_datetime("someday") is None


class TestFormatting:

    def test_currency(self):
        assert format_currency(1250000) == "₹1,250,000"
        assert format_currency("50000") == "₹50,000"
        assert format_currency("Under 50k") == "Under 50k"
        assert format_currency(float("nan")) == ""
        assert format_currency(None) == ""

    def test_datetime_local_input_is_studio_wall_time(self):
        assert format_datetime("2025-06-10T18:45") == "10 June 2025, 06:45 PM"

    def test_aware_datetime_is_converted_to_studio_time(self):
        created = datetime(2025, 6, 1, 20, 0, tzinfo=timezone.utc)
        assert format_datetime(created) == "02 June 2025, 01:30 AM"

    def test_bare_date(self):
        assert format_datetime("2025-12-05") == "05 December 2025"
        assert format_date("2025-12-05T23:00") == "05 December 2025"

    def test_unparseable_value_is_kept(self):
        assert format_datetime("after Diwali") == "after Diwali"
        assert format_datetime("") == ""

    def test_list(self):
        assert format_list(["Haldi", "Reception"]) == "Haldi, Reception"
        assert format_list([]) == ""
        assert format_list(None) == ""


def test_serialize_doc_stringifies_ids_and_localizes_dates():
    oid = ObjectId()
    doc = serialize_doc({
        "_id": oid,
        "date": datetime(2025, 6, 1, 9, 0),
        "meta": {"ref": oid},
    })

    assert doc["_id"] == str(oid)
    assert doc["meta"]["ref"] == str(oid)
    assert doc["date"] == "2025-06-01T14:30:00+05:30"
