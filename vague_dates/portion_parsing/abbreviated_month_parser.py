"""Parser for portions written with an abbreviated month name."""

from vague_dates.date_text import format_month_year
from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.named_parser import NamedPortionParser
from vague_dates.vocabulary import VocabularyTable


class AbbreviatedMonthPortionParser(NamedPortionParser):
    """Parses an abbreviated month name with an optional year.

    Example: Mar 1990 (normalised to "March 1990")
    """

    code = PortionCode.MONTH_YEAR

    def lookup(self, token: str, vocabulary: VocabularyTable) -> int | None:
        return vocabulary.abbreviated_month_index(token)

    def normalise(self, index: int, year: int, vocabulary: VocabularyTable) -> str:
        return format_month_year(index + 1, year, vocabulary)
