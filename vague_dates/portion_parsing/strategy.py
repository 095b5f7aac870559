"""Abstract base class for portion parsing strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date

from vague_dates.portion_parsing.portion import Portion
from vague_dates.vocabulary import VocabularyTable


class PortionParserStrategy(ABC):
    """Interface for portion parsing strategies."""

    def tokenize(self, text: str, vocabulary: VocabularyTable) -> list[str]:
        """Split a portion on whitespace and the locale date separator."""
        pattern = r"[\s" + re.escape(vocabulary.date_separator) + r"]+"
        return [t for t in re.split(pattern, text.strip()) if t]

    def resolve_year(self, context_year: int | None) -> int:
        """Year to use when the portion itself does not name one."""
        if context_year is not None:
            return context_year
        return date.today().year

    @abstractmethod
    def parse(self, text: str, context_year: int | None, vocabulary: VocabularyTable) -> Portion | None:
        """Classify text, or return None if this grammar does not apply.

        Args:
            text: One half of a vague date, already split on the delimiter
            context_year: Year read from the other half of a range, if any
            vocabulary: Month, season and unknown-date words to match

        Returns:
            A Portion if the text matches this grammar, None otherwise
        """
        pass
