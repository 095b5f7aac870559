"""Format stored vague dates back into display strings.

This is the inverse of the decoder: given the start and end of a vague date
(as dates or as day offsets) and its format code, rebuild the text a user
would type for it. Re-reading the output with get_type and the decoder gives
back the same offsets.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING

from vague_dates import seasons
from vague_dates.date_text import format_month_year, format_short_date
from vague_dates.date_type import (
    ABSENT_CODE,
    DateType,
    PortionCode,
    end_code,
    is_unknown_code,
    start_code,
)
from vague_dates.decoder import DATE_UNKNOWN, decode_range, to_time_span_days
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable

if TYPE_CHECKING:
    from vague_dates.instance import VagueDateInstance


logger = logging.getLogger(__name__)


def _format_portion(d: date, code: str, vocabulary: VocabularyTable) -> str | None:
    if code == PortionCode.DATE:
        return format_short_date(d, vocabulary)
    if code == PortionCode.MONTH_YEAR:
        return format_month_year(d.month, d.year, vocabulary)
    if code == PortionCode.YEAR:
        return str(d.year)
    if code == PortionCode.SEASON:
        return seasons.season_string(d, vocabulary)
    return None


def from_date(
    start_date: date | None,
    end_date: date | None,
    format_code: str | None,
    output_format: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> str:
    """Create a vague date string from start and end dates.

    Args:
        start_date: First day of the vague date, None if absent
        end_date: Last day of the vague date, None if absent
        format_code: One or two character code from get_type
        output_format: START or END for one side, VAGUE for the whole date

    Returns:
        The formatted string, or the unknown literal when nothing can be shown
    """
    unknown = vocabulary.unknown_literal
    if is_unknown_code(format_code):
        return unknown

    first, last = start_code(format_code), end_code(format_code)

    if output_format == DateType.START:
        if start_date is None:
            return unknown
        text = _format_portion(start_date, first, vocabulary)
        if text is None:
            return unknown
        if first == PortionCode.SEASON and last == ABSENT_CODE:
            return text + vocabulary.delimiter
        return text

    if output_format == DateType.END:
        if end_date is None:
            return unknown
        text = _format_portion(end_date, last, vocabulary)
        if text is None:
            return unknown
        if last == PortionCode.SEASON and first == ABSENT_CODE:
            return vocabulary.delimiter + text
        return text

    start_text = ""
    if start_date is not None:
        start_text = _format_portion(start_date, first, vocabulary) or ""

    if len(format_code) < 2:
        return start_text or unknown

    end_text = None
    if end_date is not None:
        end_text = _format_portion(end_date, last, vocabulary)

    if end_text is None:
        # Open-ended: "1990-"
        return start_text + vocabulary.delimiter if start_text else unknown
    if not start_text:
        return vocabulary.delimiter + end_text
    if start_text == end_text:
        return start_text
    return start_text + vocabulary.delimiter + end_text


def _offset_to_date(days: int | None, vocabulary: VocabularyTable) -> date | None:
    if days is None or days == DATE_UNKNOWN:
        return None
    try:
        return vocabulary.base_epoch + timedelta(days=days)
    except OverflowError:
        logger.debug("Day offset %d is outside the calendar", days)
        return None


def from_time_span_days(
    start_days: int | None,
    end_days: int | None,
    format_code: str | None,
    output_format: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> str:
    """Create a vague date string from offsets in days since the base epoch."""
    return from_date(
        _offset_to_date(start_days, vocabulary),
        _offset_to_date(end_days, vocabulary),
        format_code,
        output_format,
        vocabulary,
    )


def from_date_string(
    start_text: str | None,
    end_text: str | None,
    format_code: str | None,
    output_format: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> str:
    """Re-format separate normalised start and end strings."""
    start_days = to_time_span_days(start_text, end_text, format_code, DateType.START, vocabulary)
    end_days = to_time_span_days(start_text, end_text, format_code, DateType.END, vocabulary)
    return from_time_span_days(start_days, end_days, format_code, output_format, vocabulary)


def from_vague_date_string(
    text: str | None,
    format_code: str | None,
    output_format: DateType,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> str:
    """Re-format a complete normalised vague date string."""
    start_days, end_days = decode_range(text, format_code, vocabulary)
    return from_time_span_days(start_days, end_days, format_code, output_format, vocabulary)


def from_vague_date_instance(
    instance: VagueDateInstance,
    output_format: DateType = DateType.VAGUE,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> str:
    return from_time_span_days(
        instance.start_offset,
        instance.end_offset,
        instance.format_code,
        output_format,
        vocabulary,
    )
