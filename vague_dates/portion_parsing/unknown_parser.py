"""Parser for explicitly unknown portions."""

from vague_dates.date_type import PortionCode
from vague_dates.portion_parsing.portion import Portion
from vague_dates.portion_parsing.strategy import PortionParserStrategy
from vague_dates.vocabulary import VocabularyTable


class UnknownPortionParser(PortionParserStrategy):
    """Parses the unknown-date literal or any prefix of it.

    Example: Unknown, unk, U
    """

    def parse(self, text: str, context_year: int | None, vocabulary: VocabularyTable) -> Portion | None:
        if not vocabulary.is_unknown_text(text):
            return None
        return Portion(
            text=text,
            code=PortionCode.UNKNOWN,
            normalised_text=vocabulary.unknown_literal,
        )
