"""Parser for portions written with a full month name."""

from vague_dates.date_text import format_month_year
from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.named_parser import NamedPortionParser
from vague_dates.vocabulary import VocabularyTable


class MonthNamePortionParser(NamedPortionParser):
    """Parses a full month name with an optional year.

    Example: March 1990, january
    """

    code = PortionCode.MONTH_YEAR

    def lookup(self, token: str, vocabulary: VocabularyTable) -> int | None:
        return vocabulary.month_index(token)

    def normalise(self, index: int, year: int, vocabulary: VocabularyTable) -> str:
        return format_month_year(index + 1, year, vocabulary)
