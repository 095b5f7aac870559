"""Classify a complete vague date string and normalise its text."""

from __future__ import annotations

import logging

from vague_dates.date_type import ABSENT_CODE, PortionCode
from vague_dates.portion_parsing import classify_portion
from vague_dates.splitter import split_date_string
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


logger = logging.getLogger(__name__)


def get_type(raw: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> tuple[str, str]:
    """Determine the format code of a vague date and standardise its text.

    Format codes:
        "D"  start date             "DD" start date + end date
        "D-" start date range       "-D" end date range
        "O"  month and year         "OO" start and end month and year
        "O-" start month range      "-O" end month range
        "Y"  year                   "YY" start year + end year
        "Y-" start year range       "-Y" end year range
        "P"  season                 "PP" start season + end season
        "P-" start season range     "-P" end season range
        "U"  unknown
    Mixed pairs such as "DY" occur when the halves use different grammars.

    Args:
        raw: The text as typed, e.g. "January-March 1990"
        vocabulary: Words and separators to use

    Returns:
        (format_code, normalised_text). ("", "") for empty input and
        ("", raw) when the text cannot be read.
    """
    if not raw:
        return "", ""

    split = split_date_string(raw, vocabulary)
    if not split.is_valid:
        logger.debug("Vague date %r has %d portions", raw, split.segment_count)
        return "", raw
    if split.segment_count == 0:
        return "", ""

    if not split.delimiter_found and not split.end_text:
        if vocabulary.is_unknown_text(split.start_text):
            return PortionCode.UNKNOWN, vocabulary.unknown_literal
        portion = classify_portion(split.start_text, None, vocabulary)
        if portion.is_absent:
            return "", raw
        return portion.code, portion.normalised_text

    # The end half is read first so a start half without a year ("3-5/1990",
    # "January-March 1990") can borrow it.
    end = classify_portion(split.end_text, None, vocabulary)
    start = classify_portion(split.start_text, end.year, vocabulary)

    start_code, end_code = start.code, end.code
    if start_code == PortionCode.UNKNOWN and end_code != PortionCode.UNKNOWN:
        start_code = ""
    elif start_code != PortionCode.UNKNOWN and end_code == PortionCode.UNKNOWN:
        end_code = ""

    if start_code == PortionCode.UNKNOWN and end_code == PortionCode.UNKNOWN:
        return PortionCode.UNKNOWN, vocabulary.unknown_literal

    delimiter = vocabulary.delimiter
    if start_code and not end_code:
        return start_code + ABSENT_CODE, start.normalised_text + delimiter
    if end_code and not start_code:
        return ABSENT_CODE + end_code, delimiter + end.normalised_text
    if not start_code and not end_code:
        logger.debug("Neither portion of vague date %r could be read", raw)
        return "", raw
    if start.normalised_text != end.normalised_text:
        return start_code + end_code, start.normalised_text + delimiter + end.normalised_text
    return start_code, start.normalised_text


def classify_full(raw: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> tuple[str, str]:
    """Alias of get_type."""
    return get_type(raw, vocabulary)
