"""
CardJSON Release Date Codec

Release dates in the card dataset come in three precisions:
"2015-05-20" (full), "1993-08" (month) and "1993" (year).
A missing or empty date is a valid "unknown" value, not an error.
"""

import datetime
import enum
import re
from dataclasses import dataclass
from typing import Callable, ClassVar, List, Optional, Tuple, Union


class ReleaseDatePrecision(enum.Enum):
    """
    How much of a release date is known
    """

    NONE = "none"
    FULL = "full"
    MONTH = "month"
    YEAR = "year"


class InvalidReleaseDateFormat(ValueError):
    """Raised when a non-empty release date string cannot be parsed."""

    def __init__(self, raw: str, reason: str = "") -> None:
        self.raw = raw
        self.reason = reason
        message = f"Invalid release date {raw!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


def _check_year(year: int) -> None:
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise ValueError(f"year {year} is out of range")


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month {month} is out of range")


@dataclass(frozen=True)
class UnknownReleaseDate:
    """No release date information"""

    precision: ClassVar[ReleaseDatePrecision] = ReleaseDatePrecision.NONE


@dataclass(frozen=True)
class FullReleaseDate:
    """Year, month and day are known"""

    year: int
    month: int
    day: int

    precision: ClassVar[ReleaseDatePrecision] = ReleaseDatePrecision.FULL

    def __post_init__(self) -> None:
        # datetime.date performs proleptic Gregorian validation, leap years included
        datetime.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class MonthReleaseDate:
    """Year and month are known"""

    year: int
    month: int

    precision: ClassVar[ReleaseDatePrecision] = ReleaseDatePrecision.MONTH

    def __post_init__(self) -> None:
        _check_year(self.year)
        _check_month(self.month)


@dataclass(frozen=True)
class YearReleaseDate:
    """Only the year is known"""

    year: int

    precision: ClassVar[ReleaseDatePrecision] = ReleaseDatePrecision.YEAR

    def __post_init__(self) -> None:
        _check_year(self.year)


ReleaseDate = Union[
    UnknownReleaseDate, FullReleaseDate, MonthReleaseDate, YearReleaseDate
]

RELEASE_DATE_TYPES: Tuple[type, ...] = (
    UnknownReleaseDate,
    FullReleaseDate,
    MonthReleaseDate,
    YearReleaseDate,
)

# Tried in order; the first matching pattern decides the precision
_RELEASE_DATE_RULES: List[Tuple[re.Pattern[str], Callable[..., ReleaseDate]]] = [
    (re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII), FullReleaseDate),
    (re.compile(r"(\d{4})-(\d{1,2})", re.ASCII), MonthReleaseDate),
    (re.compile(r"(\d{4})", re.ASCII), YearReleaseDate),
]


def parse_release_date(raw: Optional[str]) -> ReleaseDate:
    """
    Parse a release date string of full, month, or year precision
    :param raw: Date string from a record, or None if absent
    :return: Release date value tagged with its precision
    :raises InvalidReleaseDateFormat: Non-empty input that is not a valid date
    """
    if not raw:
        return UnknownReleaseDate()

    for pattern, release_date_type in _RELEASE_DATE_RULES:
        match = pattern.fullmatch(raw)
        if not match:
            continue

        try:
            return release_date_type(*(int(group) for group in match.groups()))
        except ValueError as error:
            raise InvalidReleaseDateFormat(raw, str(error)) from error

    raise InvalidReleaseDateFormat(raw, "expected YYYY-MM-DD, YYYY-MM, or YYYY")


def format_release_date(value: ReleaseDate) -> str:
    """
    Convert a release date value to its canonical string
    :param value: Release date value
    :return: "YYYY-MM-DD", "YYYY-MM", "YYYY", or "" if unknown
    """
    if isinstance(value, FullReleaseDate):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    if isinstance(value, MonthReleaseDate):
        return f"{value.year:04d}-{value.month:02d}"
    if isinstance(value, YearReleaseDate):
        return f"{value.year:04d}"
    if isinstance(value, UnknownReleaseDate):
        return ""

    raise TypeError(f"Not a release date value: {value!r}")
