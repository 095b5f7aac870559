"""Parser for purely numeric portions (years and month numbers)."""

from __future__ import annotations

from vague_dates.date_text import format_month_year, parse_int, parse_year
from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.portion import Portion
from vague_dates.portion_parsing.strategy import PortionParserStrategy
from vague_dates.vocabulary import VocabularyTable


class NumericPortionParser(PortionParserStrategy):
    """Parses a bare number, or a month number followed by a year.

    Examples: 1990, 7, 3/1990

    A single number is ambiguous. Without a context year, or when it cannot
    be a month (above 12 or negative), it is a year. Otherwise it is a month
    of the context year, as in the "3" of "3-5/1990".
    """

    def parse(self, text: str, context_year: int | None, vocabulary: VocabularyTable) -> Portion | None:
        tokens = self.tokenize(text, vocabulary)

        if len(tokens) == 1:
            number = parse_int(tokens[0])
            if number is None:
                return None
            if context_year is None or number > 12 or number < 0:
                year = parse_year(tokens[0])
                if year is None:
                    return None
                return Portion(text=text, code=PortionCode.YEAR, normalised_text=str(year), year=year)
            if number == 0:
                return None
            return Portion(
                text=text,
                code=PortionCode.MONTH_YEAR,
                normalised_text=format_month_year(number, context_year, vocabulary),
                year=context_year,
            )

        if len(tokens) == 2:
            month = parse_int(tokens[0])
            year = parse_year(tokens[1])
            if month is None or year is None or not 1 <= month <= 12:
                return None
            return Portion(
                text=text,
                code=PortionCode.MONTH_YEAR,
                normalised_text=format_month_year(month, year, vocabulary),
                year=year,
            )

        return None
