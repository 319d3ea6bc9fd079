"""
CardJSON, card and set record decoding with precision-tagged release dates
MIT License
"""

from .release_date import (
    FullReleaseDate,
    InvalidReleaseDateFormat,
    MonthReleaseDate,
    ReleaseDate,
    ReleaseDatePrecision,
    UnknownReleaseDate,
    YearReleaseDate,
    format_release_date,
    parse_release_date,
)

__all__ = [
    "FullReleaseDate",
    "InvalidReleaseDateFormat",
    "MonthReleaseDate",
    "ReleaseDate",
    "ReleaseDatePrecision",
    "UnknownReleaseDate",
    "YearReleaseDate",
    "format_release_date",
    "parse_release_date",
]
