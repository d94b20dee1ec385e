"""Tests for age and timestamp formatting."""

from datetime import datetime, timedelta, timezone

from kube_versions.utils.age import format_age, short_timestamp

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestFormatAge:
    def test_days(self):
        assert format_age(NOW - timedelta(days=2, hours=23), now=NOW) == "2d"

    def test_hours(self):
        assert format_age(NOW - timedelta(hours=5, minutes=59), now=NOW) == "5h"

    def test_minutes(self):
        assert format_age(NOW - timedelta(minutes=7), now=NOW) == "7m"

    def test_naive_timestamp_is_utc(self):
        assert format_age(datetime(2024, 3, 10, 10, 0), now=NOW) == "2h"

    def test_future_timestamp(self):
        assert format_age(NOW + timedelta(minutes=5), now=NOW) == "0m"

    def test_missing(self):
        assert format_age(None) == "unknown"


class TestShortTimestamp:
    def test_rfc3339(self):
        assert short_timestamp("2024-03-01T10:00:00.123456789Z") == "2024-03-01 10:00:00"

    def test_plain(self):
        assert short_timestamp("2024-03-01T10:00:00Z") == "2024-03-01 10:00:00"

    def test_empty(self):
        assert short_timestamp("") == ""

    def test_offset_kept_as_written(self):
        assert short_timestamp("2024-03-01T10:00:00.5+02:00") == "2024-03-01 10:00:00"
