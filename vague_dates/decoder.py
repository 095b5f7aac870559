"""Convert normalised vague date text into day offsets from the base epoch.

Offsets are plain integer day counts, suitable for storage and range
queries. The start offset of a portion is its first day and the end offset
its last day: "March 1990" covers 1990-03-01 to 1990-03-31, "1990" covers
1990-01-01 to 1990-12-31.

Nothing here raises for malformed input. Text that cannot be read decodes
to DATE_UNKNOWN.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date

from vague_dates import seasons
from vague_dates.date_text import parse_full_date, parse_month_year, parse_season_year, parse_year
from vague_dates.date_type import DateType, PortionCode, is_unknown_code, side_code
from vague_dates.splitter import split_date_string
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


logger = logging.getLogger(__name__)

# Smallest 32-bit integer; no date in years 1..9999 is this far from any epoch.
DATE_UNKNOWN = -2147483648


def days_since_epoch(d: date, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> int:
    return (d - vocabulary.base_epoch).days


def _decode_portion(text: str, code: str, want: DateType, vocabulary: VocabularyTable) -> date | None:
    if code == PortionCode.DATE:
        return parse_full_date(text, vocabulary)

    if code == PortionCode.MONTH_YEAR:
        parsed = parse_month_year(text, vocabulary)
        if parsed is None:
            return None
        month, year = parsed
        if want == DateType.END:
            return date(year, month, calendar.monthrange(year, month)[1])
        return date(year, month, 1)

    if code == PortionCode.YEAR:
        full = parse_full_date(text, vocabulary)
        year = full.year if full is not None else parse_year(text)
        if year is None:
            return None
        if want == DateType.END:
            return date(year, 12, 31)
        return date(year, 1, 1)

    if code == PortionCode.SEASON:
        parsed = parse_season_year(text, vocabulary)
        if parsed is None:
            return None
        season_index, year = parsed
        if want == DateType.END:
            return seasons.season_end(season_index, year)
        return seasons.season_start(season_index, year)

    return None


def to_time_span_days(
    start_text: str | None,
    end_text: str | None,
    format_code: str | None,
    want: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> int:
    """Decode one side of a vague date into days since the base epoch.

    Args:
        start_text: Normalised start portion, e.g. "March 1990"
        end_text: Normalised end portion
        format_code: One or two character code from get_type
        want: DateType.START or DateType.END

    Returns:
        The offset of the first (START) or last (END) day, or DATE_UNKNOWN
    """
    if is_unknown_code(format_code):
        return DATE_UNKNOWN

    code = side_code(format_code, want)
    text = end_text if want == DateType.END else start_text
    if want == DateType.END and not text and len(format_code) == 1:
        text = start_text
    if not text:
        return DATE_UNKNOWN

    try:
        decoded = _decode_portion(text.strip(), code, want, vocabulary)
    except (ValueError, OverflowError) as e:
        logger.debug("Cannot decode %r as %r: %s", text, code, e)
        return DATE_UNKNOWN
    if decoded is None:
        logger.debug("Cannot decode %r as %r", text, code)
        return DATE_UNKNOWN
    return days_since_epoch(decoded, vocabulary)


def to_time_span_days_from_string(
    normalised: str | None,
    format_code: str | None,
    want: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> int:
    """Split a normalised vague date string and decode one side of it.

    A string without a delimiter describes both sides, so its END is
    decoded from the same text as its START.
    """
    split = split_date_string(normalised, vocabulary)
    if not split.is_valid:
        return DATE_UNKNOWN
    end_text = split.end_text
    if want == DateType.END and not split.delimiter_found:
        end_text = split.start_text
    return to_time_span_days(split.start_text, end_text, format_code, want, vocabulary)


def decode_range(
    normalised: str | None,
    format_code: str | None,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> tuple[int, int]:
    """Decode both sides of a normalised vague date into (start, end) offsets."""
    return (
        to_time_span_days_from_string(normalised, format_code, DateType.START, vocabulary),
        to_time_span_days_from_string(normalised, format_code, DateType.END, vocabulary),
    )
