"""Parser for exact calendar dates."""

from vague_dates.date_text import format_short_date, parse_full_date
from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.portion import Portion
from vague_dates.portion_parsing.strategy import PortionParserStrategy
from vague_dates.vocabulary import VocabularyTable


class FullDatePortionParser(PortionParserStrategy):
    """Parses a complete date with day, month and year.

    Example: 1/3/1990, 1 March 1990
    """

    def parse(self, text: str, context_year: int | None, vocabulary: VocabularyTable) -> Portion | None:
        parsed = parse_full_date(text, vocabulary)
        if parsed is None:
            return None
        return Portion(
            text=text,
            code=PortionCode.DATE,
            normalised_text=format_short_date(parsed, vocabulary),
            year=parsed.year,
        )
