"""Reading and writing the textual forms of single vague date portions."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from functools import lru_cache

from dateutil import parser

from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


# dateutil fills missing fields from the default. Parsing with two different
# defaults shows which fields the text actually supplied.
_NO_DATE_DEFAULT = datetime(1, 1, 1)
_CHECK_DEFAULT = datetime(4, 2, 2)

# date.max.year is reserved for the unknown era, which formats without a year.
MAX_YEAR = date.max.year - 1

_WHITESPACE_RE = re.compile(r"\s+")


class VocabularyParserInfo(parser.parserinfo):
    """dateutil parser settings that read month names from a vocabulary."""

    def __init__(self, vocabulary: VocabularyTable):
        self.MONTHS = list(zip(vocabulary.abbreviated_month_names, vocabulary.month_names))
        super().__init__(dayfirst=vocabulary.day_first)


@lru_cache(maxsize=8)
def _parserinfo_for(vocabulary: VocabularyTable) -> VocabularyParserInfo:
    return VocabularyParserInfo(vocabulary)


def parse_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token.strip())
    except ValueError:
        return None


def parse_year(token: str | None) -> int | None:
    """Parse a token as a year a vague date can hold (1..MAX_YEAR)."""
    year = parse_int(token)
    if year is None or not date.min.year <= year <= MAX_YEAR:
        return None
    return year


def parse_full_date(text: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> date | None:
    """Parse a complete calendar date (day, month and year all given).

    Returns None when the text is not a date, when any of day, month or year
    had to be defaulted, or when it carries a time of day.
    """
    if not text or not text.strip():
        return None
    try:
        info = _parserinfo_for(vocabulary)
        parsed = parser.parse(text, parserinfo=info, default=_NO_DATE_DEFAULT)
        second = parser.parse(text, parserinfo=info, default=_CHECK_DEFAULT)
    except (ValueError, OverflowError):
        return None

    if parsed != second:
        return None
    # Year 1 is what the parser reports when no year was given.
    if parsed.year == _NO_DATE_DEFAULT.year or parsed.year > MAX_YEAR:
        return None
    if parsed.tzinfo is not None or parsed.time() != time(0, 0):
        return None
    return parsed.date()


def format_short_date(d: date, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> str:
    # strftime does not zero-pad years below 1000 on every platform.
    fmt = vocabulary.short_date_format.replace("%Y", f"{d.year:04d}")
    return d.strftime(fmt)


def format_month_year(month: int, year: int, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> str:
    return f"{vocabulary.month_names[month - 1]} {year}"


def format_season_year(season_index: int, year: int, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> str:
    return f"{vocabulary.season_names[season_index]} {year}"


def _split_name_and_year(text: str | None) -> tuple[str, int] | None:
    if not text:
        return None
    tokens = _WHITESPACE_RE.split(text.strip())
    if len(tokens) != 2:
        return None
    year = parse_year(tokens[1])
    if year is None:
        return None
    return tokens[0], year


def parse_month_year(text: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> tuple[int, int] | None:
    """Read "<Month> <year>" into (month 1..12, year)."""
    parts = _split_name_and_year(text)
    if parts is None:
        return None
    name, year = parts
    index = vocabulary.month_index(name)
    if index is None:
        index = vocabulary.abbreviated_month_index(name)
    if index is None:
        number = parse_int(name)
        if number is None or not 1 <= number <= 12:
            return None
        return number, year
    return index + 1, year


def parse_season_year(text: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> tuple[int, int] | None:
    """Read "<Season> <year>" into (season index 0..3, year)."""
    parts = _split_name_and_year(text)
    if parts is None:
        return None
    name, year = parts
    index = vocabulary.season_index(name)
    if index is None:
        return None
    return index, year
