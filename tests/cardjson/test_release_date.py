"""
Tests for cardjson/release_date.py
"""

import pytest

from cardjson.release_date import (
    FullReleaseDate,
    InvalidReleaseDateFormat,
    MonthReleaseDate,
    ReleaseDatePrecision,
    UnknownReleaseDate,
    YearReleaseDate,
    format_release_date,
    parse_release_date,
)


# =============================================================================
# Parsing
# =============================================================================


class TestParseReleaseDate:
    """Test suite for parse_release_date function."""

    @pytest.mark.parametrize(
        "raw,expected,precision",
        [
            ("2015-05-20", FullReleaseDate(2015, 5, 20), ReleaseDatePrecision.FULL),
            ("1993-08-05", FullReleaseDate(1993, 8, 5), ReleaseDatePrecision.FULL),
            ("2016-02-29", FullReleaseDate(2016, 2, 29), ReleaseDatePrecision.FULL),
            ("2000-02-29", FullReleaseDate(2000, 2, 29), ReleaseDatePrecision.FULL),
            ("1993-08", MonthReleaseDate(1993, 8), ReleaseDatePrecision.MONTH),
            ("2011-12", MonthReleaseDate(2011, 12), ReleaseDatePrecision.MONTH),
            ("1993", YearReleaseDate(1993), ReleaseDatePrecision.YEAR),
            ("0001", YearReleaseDate(1), ReleaseDatePrecision.YEAR),
        ],
    )
    def test_valid_dates(self, raw, expected, precision):
        parsed = parse_release_date(raw)

        assert parsed == expected
        assert parsed.precision is precision

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_or_absent_is_unknown(self, raw):
        parsed = parse_release_date(raw)

        assert parsed == UnknownReleaseDate()
        assert parsed.precision is ReleaseDatePrecision.NONE

    def test_single_digit_fields_are_accepted(self):
        assert parse_release_date("1995-7-4") == FullReleaseDate(1995, 7, 4)
        assert parse_release_date("1995-7") == MonthReleaseDate(1995, 7)

    @pytest.mark.parametrize(
        "raw",
        [
            "2015-13-40",
            "2015-02-30",
            "2015-02-29",
            "1900-02-29",
            "2015-04-31",
            "2015-00-10",
            "2015-01-00",
            "2015-13",
            "2015-00",
            "0000",
        ],
    )
    def test_out_of_range_fields(self, raw):
        with pytest.raises(InvalidReleaseDateFormat) as error:
            parse_release_date(raw)

        assert error.value.raw == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-date",
            "93",
            "19930",
            "1993-",
            "1993-08-",
            "1993-008",
            "1993-08-005",
            "1993/08/05",
            "05-08-1993",
            " 1993-08-05",
            "1993-08-05 ",
            "1993-08-05T00:00:00",
            "१९९३",
        ],
    )
    def test_unrecognized_formats(self, raw):
        with pytest.raises(InvalidReleaseDateFormat) as error:
            parse_release_date(raw)

        assert error.value.raw == raw
        assert raw in str(error.value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_release_date("not-a-date")


# =============================================================================
# Formatting
# =============================================================================


class TestFormatReleaseDate:
    """Test suite for format_release_date function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (FullReleaseDate(2015, 5, 20), "2015-05-20"),
            (FullReleaseDate(1995, 7, 4), "1995-07-04"),
            (MonthReleaseDate(1993, 8), "1993-08"),
            (YearReleaseDate(1993), "1993"),
            (YearReleaseDate(987), "0987"),
            (UnknownReleaseDate(), ""),
        ],
    )
    def test_canonical_strings(self, value, expected):
        assert format_release_date(value) == expected

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            format_release_date("2015-05-20")


# =============================================================================
# Round trip
# =============================================================================


@pytest.mark.parametrize(
    "raw,canonical",
    [
        ("2015-05-20", "2015-05-20"),
        ("1993-08", "1993-08"),
        ("1993", "1993"),
        ("", ""),
        ("1995-7-4", "1995-07-04"),
        ("2001-3", "2001-03"),
    ],
)
def test_format_of_parse_reparses_to_equal_value(raw, canonical):
    parsed = parse_release_date(raw)
    formatted = format_release_date(parsed)

    assert formatted == canonical
    assert parse_release_date(formatted) == parsed


# =============================================================================
# Values
# =============================================================================


class TestReleaseDateValues:
    """Construction contract of the release date variants."""

    @pytest.mark.parametrize(
        "build",
        [
            lambda: FullReleaseDate(2015, 2, 30),
            lambda: FullReleaseDate(2015, 13, 1),
            lambda: FullReleaseDate(0, 1, 1),
            lambda: MonthReleaseDate(2015, 0),
            lambda: MonthReleaseDate(10000, 1),
            lambda: YearReleaseDate(0),
        ],
    )
    def test_invalid_components_are_rejected(self, build):
        with pytest.raises(ValueError):
            build()

    def test_fields_match_precision(self):
        assert not hasattr(YearReleaseDate(1993), "month")
        assert not hasattr(MonthReleaseDate(1993, 8), "day")
        assert not hasattr(UnknownReleaseDate(), "year")

    def test_values_are_immutable(self):
        value = FullReleaseDate(2015, 5, 20)

        with pytest.raises(AttributeError):
            value.year = 2016  # type: ignore[misc]

    def test_values_are_hashable(self):
        values = {
            parse_release_date("1993"),
            parse_release_date("1993"),
            parse_release_date("1993-01"),
        }

        assert values == {YearReleaseDate(1993), MonthReleaseDate(1993, 1)}

    def test_precisions_of_different_variants_never_compare_equal(self):
        assert YearReleaseDate(1993) != MonthReleaseDate(1993, 1)
        assert MonthReleaseDate(1993, 1) != FullReleaseDate(1993, 1, 1)
