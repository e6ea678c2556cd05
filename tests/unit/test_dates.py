"""Tests for snapshot date resolution."""

from datetime import UTC, date, datetime

import pytest

from build_planner.dates import description_date, parse_date, resolve_date
from build_planner.errors import BuildPlannerError, DateParseError


class TestResolveDate:
    """Test suite for resolve_date."""

    @pytest.mark.parametrize("hour", [0, 9, 23])
    def test_defaults_to_yesterday(self, hour: int) -> None:
        """Test that a missing date resolves to yesterday at any time of day."""
        now = datetime(2018, 10, 6, hour, 59, tzinfo=UTC)
        assert resolve_date(None, lambda: now) == "2018-10-05"

    def test_yesterday_crosses_year_boundary(self) -> None:
        """Test that the default handles the first day of a year."""
        now = datetime(2019, 1, 1, 12, tzinfo=UTC)
        assert resolve_date(None, lambda: now) == "2018-12-31"

    def test_explicit_date_object(self, clock) -> None:
        """Test that date objects are formatted directly."""
        assert resolve_date(date(2017, 3, 4), clock) == "2017-03-04"

    @pytest.mark.parametrize(
        "text",
        ["2018-10-05", "5 October 2018", "October 5, 2018", "2018/10/05"],
    )
    def test_parses_date_text(self, text: str, clock) -> None:
        """Test that common date expressions are normalized."""
        assert resolve_date(text, clock) == "2018-10-05"

    @pytest.mark.parametrize(
        "text,expected",
        [("2018", "2018-01-01"), ("March 2017", "2017-03-01"), ("October", "2000-10-01")],
    )
    def test_partial_date_does_not_use_today(self, text: str, expected: str) -> None:
        """Test that missing date parts are fixed, whatever the current day."""
        for now in (datetime(2018, 10, 6, tzinfo=UTC), datetime(2019, 7, 30, tzinfo=UTC)):
            assert resolve_date(text, lambda: now) == expected

    def test_invalid_text_is_fatal(self, clock) -> None:
        """Test that unparsable text raises with the text in the message."""
        with pytest.raises(DateParseError) as exc_info:
            resolve_date("not a date at all", clock)

        assert "not a date at all" in str(exc_info.value)
        assert exc_info.value.text == "not a date at all"

    def test_error_is_value_error(self, clock) -> None:
        """Test that date errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolve_date("yesterday-ish", clock)
        assert issubclass(DateParseError, BuildPlannerError)


class TestParseDate:
    """Test suite for parse_date."""

    def test_timezone_is_converted_to_utc(self) -> None:
        """Test that aware timestamps are dated in UTC."""
        assert parse_date("2018-10-05T23:30:00-05:00") == date(2018, 10, 6)

    def test_source_in_message(self) -> None:
        """Test that the error names where the text came from."""
        with pytest.raises(DateParseError, match="environ.jsonld: bogus"):
            parse_date("bogus", "environ.jsonld")


class TestDescriptionDate:
    """Test suite for description_date."""

    def test_extracts_date_field(self) -> None:
        """Test that the Date field value is returned."""
        text = "Package: analysis\nDate:   2018-10-05\nVersion: 1.0\n"
        assert description_date(text) == "2018-10-05"

    def test_missing_field(self) -> None:
        """Test that None is returned without a Date field."""
        assert description_date("Package: analysis\n") is None

    def test_ignores_other_date_fields(self) -> None:
        """Test that fields merely ending in Date are not matched."""
        text = "Package: analysis\nPackaged-Date: 2001-01-01\n"
        assert description_date(text) is None

    def test_blank_field_is_absent(self) -> None:
        """Test that a Date field holding only spaces counts as missing."""
        assert description_date("Package: analysis\nDate:   \nVersion: 1.0\n") is None
