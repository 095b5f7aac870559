"""Classify a single portion of a vague date."""

from __future__ import annotations

import logging

from vague_dates.date_text import parse_year
from vague_dates.portion_parsing.factory import PortionParserFactory, PortionParsers
from vague_dates.portion_parsing.portion import Portion
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


logger = logging.getLogger(__name__)

# Order matters: a bare number is read as a year or month before the
# general date parser gets a chance to read it some other way.
PARSER_STEPS = (
    PortionParsers.UNKNOWN,
    PortionParsers.NUMERIC,
    PortionParsers.MONTH_NAME,
    PortionParsers.ABBREVIATED_MONTH_NAME,
    PortionParsers.SEASON_NAME,
    PortionParsers.FULL_DATE,
)


def _coerce_context_year(context_year: int | str | None) -> int | None:
    if context_year is None or isinstance(context_year, int):
        return context_year
    return parse_year(context_year)


def classify_portion(
    text: str | None,
    context_year: int | str | None = None,
    vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
) -> Portion:
    """Determine which grammar one half of a vague date follows.

    Args:
        text: The start or end half of a split vague date
        context_year: Year of the other half, used for lone months and seasons
        vocabulary: Words and separators to match against

    Returns:
        A Portion whose code is D, O, Y, P or U; the code is "" when the text
        is empty or matches no grammar. Never raises for malformed text.
    """
    if not text or not text.strip():
        return Portion(text=text or "", code="", normalised_text="")

    t = text.strip()
    year = _coerce_context_year(context_year)
    for step in PARSER_STEPS:
        parser = PortionParserFactory.get_parser(step)
        portion = parser.parse(t, year, vocabulary)
        if portion is not None:
            return portion

    logger.debug("Unrecognised vague date portion: %r", t)
    return Portion(text=t, code="", normalised_text=t)
