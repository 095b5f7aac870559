"""Parser for portions written with a season name."""

from vague_dates.date_text import format_season_year
from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.named_parser import NamedPortionParser
from vague_dates.vocabulary import VocabularyTable


class SeasonPortionParser(NamedPortionParser):
    """Parses a season name with an optional year.

    Example: Spring 1990, winter
    """

    code = PortionCode.SEASON

    def lookup(self, token: str, vocabulary: VocabularyTable) -> int | None:
        return vocabulary.season_index(token)

    def normalise(self, index: int, year: int, vocabulary: VocabularyTable) -> str:
        return format_season_year(index, year, vocabulary)
