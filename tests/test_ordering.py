"""Tests for voting_data/ordering.py."""

from datetime import datetime, timezone

from voting_data.ordering import parse_meeting_date, sort_meetings


def test_parse_iso_date_is_utc():
    assert parse_meeting_date("2024-01-08") == datetime(2024, 1, 8, tzinfo=timezone.utc)


def test_parse_keeps_explicit_offset():
    parsed = parse_meeting_date("2024-01-08T19:00:00-05:00")
    assert parsed.utcoffset().total_seconds() == -5 * 3600


def test_parse_loose_format():
    assert parse_meeting_date("January 8, 2024") == datetime(2024, 1, 8, tzinfo=timezone.utc)


def test_parse_partial_date_uses_fixed_anchor():
    assert parse_meeting_date("February 2024") == datetime(2024, 2, 1, tzinfo=timezone.utc)


def test_sort_partial_dates_deterministically():
    meetings = [{"date": "January 2024", "id": "jan"}, {"date": "2024-01-01", "id": "iso"}]
    assert [m["id"] for m in sort_meetings(meetings)] == ["jan", "iso"]


def test_parse_invalid_values():
    assert parse_meeting_date("not a date") is None
    assert parse_meeting_date("") is None
    assert parse_meeting_date(None) is None
    assert parse_meeting_date(20240108) is None


def test_sort_newest_first():
    meetings = [{"date": "2024-01-08"}, {"date": "2024-03-11"}, {"date": "2024-02-12"}]
    assert [m["date"] for m in sort_meetings(meetings)] == ["2024-03-11", "2024-02-12", "2024-01-08"]


def test_sort_equal_dates_keep_input_order():
    meetings = [
        {"date": "2024-01-08", "id": "first"},
        {"date": "2024-02-12", "id": "newer"},
        {"date": "2024-01-08", "id": "second"},
        {"date": "2024-01-08T00:00:00Z", "id": "third"},
    ]
    assert [m["id"] for m in sort_meetings(meetings)] == ["newer", "first", "second", "third"]


def test_sort_unparseable_dates_last_in_input_order():
    meetings = [
        {"date": "TBD", "id": "tbd"},
        {"date": "2024-01-08", "id": "jan"},
        {"id": "missing"},
        {"date": "2024-02-12", "id": "feb"},
    ]
    assert [m["id"] for m in sort_meetings(meetings)] == ["feb", "jan", "tbd", "missing"]


def test_sort_mixes_naive_and_aware_dates():
    meetings = [{"date": "2024-01-08T12:00:00"}, {"date": "2024-01-08T13:00:00+00:00"}]
    assert sort_meetings(meetings)[0]["date"] == "2024-01-08T13:00:00+00:00"


def test_sort_returns_same_objects():
    meeting = {"date": "2024-01-08"}
    assert sort_meetings([meeting])[0] is meeting


def test_sort_empty():
    assert sort_meetings([]) == []
