"""Tests for manifest date normalization."""

from datetime import date, datetime, timezone

import pytest

from featuredoc_engine.manifest.dates import format_date, normalize_date


class TestStrictFormats:
    def test_date_only(self):
        assert normalize_date("2026-03-14") == datetime(2026, 3, 14)

    def test_year_month(self):
        assert normalize_date("2026-03") == datetime(2026, 3, 1)

    def test_date_with_seconds(self):
        assert normalize_date("2026-03-14T09:30:05") == datetime(2026, 3, 14, 9, 30, 5)

    def test_surrounding_whitespace(self):
        assert normalize_date("  2026-03-14 ") == datetime(2026, 3, 14)


class TestGenericFallback:
    @pytest.mark.parametrize("raw,expected", [
        ("March 14, 2026", datetime(2026, 3, 14)),
        ("Mar 14, 2026", datetime(2026, 3, 14)),
        ("14 March 2026", datetime(2026, 3, 14)),
        ("2026/03/14", datetime(2026, 3, 14)),
        ("03/14/2026", datetime(2026, 3, 14)),
        ("March 2026", datetime(2026, 3, 1)),
    ])
    def test_human_formats(self, raw, expected):
        assert normalize_date(raw) == expected

    def test_iso_with_utc_offset_becomes_naive(self):
        result = normalize_date("2026-03-14T23:30:00-02:00")
        assert result == datetime(2026, 3, 15, 1, 30)
        assert result.tzinfo is None

    def test_zulu_suffix(self):
        assert normalize_date("2026-03-14T09:30:00Z") == datetime(2026, 3, 14, 9, 30)


class TestAbsentValues:
    @pytest.mark.parametrize("raw", [None, "", "   ", "TBD", "tbd", "not-a-date", "Q3", "2026-13-01"])
    def test_returns_none(self, raw):
        assert normalize_date(raw) is None

    def test_non_string_values(self):
        assert normalize_date(42) is None
        assert normalize_date(["2026-03-14"]) is None


class TestYamlScalars:
    def test_date_object(self):
        assert normalize_date(date(2026, 3, 14)) == datetime(2026, 3, 14)

    def test_aware_datetime(self):
        aware = datetime(2026, 3, 14, 12, 0, tzinfo=timezone.utc)
        assert normalize_date(aware) == datetime(2026, 3, 14, 12, 0)


class TestFormatDate:
    def test_formats_iso_day(self):
        assert format_date(datetime(2026, 3, 14, 9, 30)) == "2026-03-14"

    def test_none_is_empty(self):
        assert format_date(None) == ""

    @pytest.mark.parametrize("raw", ["2026-03-14", "2026-03", "2026-03-14T09:30:00", "March 14, 2026"])
    def test_normalize_is_stable(self, raw):
        first = normalize_date(raw)
        again = normalize_date(format_date(first))
        assert again.date() == first.date()
