"""Tests for date conversion helpers."""

from datetime import date, datetime

import pytest

from labdb.utils.dates import build_date, from_sql_date, to_sql_date


class TestToSqlDate:
    """Tests for to_sql_date."""

    def test_date_to_iso(self):
        assert to_sql_date(date(1990, 1, 5)) == "1990-01-05"

    def test_datetime_truncated_to_day(self):
        """Time of day is dropped."""
        assert to_sql_date(datetime(1990, 1, 5, 23, 59, 1)) == "1990-01-05"

    def test_none_is_null(self):
        assert to_sql_date(None) is None


class TestFromSqlDate:
    """Tests for from_sql_date."""

    def test_iso_text(self):
        assert from_sql_date("1990-01-05") == date(1990, 1, 5)

    def test_null_is_none(self):
        """NULL maps to None, not a sentinel date."""
        assert from_sql_date(None) is None

    def test_timestamp_text_raises(self):
        """Only canonical YYYY-MM-DD text is accepted."""
        with pytest.raises(ValueError):
            from_sql_date("1990-01-05 10:00:00")

    def test_compact_text_raises(self):
        with pytest.raises(ValueError):
            from_sql_date("19900105")

    def test_integer_raises(self):
        """Numbers stored in the DATE column are rejected."""
        with pytest.raises(ValueError):
            from_sql_date(20200101)

    def test_bytes(self):
        assert from_sql_date(b"2001-09-30") == date(2001, 9, 30)

    def test_date_passthrough(self):
        """Values already converted by the driver are kept."""
        assert from_sql_date(date(2001, 9, 30)) == date(2001, 9, 30)
        assert from_sql_date(datetime(2001, 9, 30, 8)) == date(2001, 9, 30)

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            from_sql_date("not a date")


class TestBuildDate:
    """Tests for build_date."""

    def test_day_month_year_order(self):
        assert build_date(10, 12, 1815) == date(1815, 12, 10)

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            build_date(31, 2, 2020)
