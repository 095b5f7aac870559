"""Shared logic for portions led by a month or season name."""

from __future__ import annotations

from abc import abstractmethod

from vague_dates.date_text import parse_year
from vague_dates.portion_parsing.portion import Portion
from vague_dates.portion_parsing.strategy import PortionParserStrategy
from vague_dates.vocabulary import VocabularyTable


class NamedPortionParser(PortionParserStrategy):
    """Parses "<Name>" or "<Name> <year>".

    A lone name takes the context year, or the current year when there is
    none. Names match case-insensitively and only when exactly one entry of
    the vocabulary list matches.
    """

    code: str = ""

    @abstractmethod
    def lookup(self, token: str, vocabulary: VocabularyTable) -> int | None:
        """Return the 0-based index of token in the relevant name list."""

    @abstractmethod
    def normalise(self, index: int, year: int, vocabulary: VocabularyTable) -> str:
        """Canonical text for the matched name and year."""

    def parse(self, text: str, context_year: int | None, vocabulary: VocabularyTable) -> Portion | None:
        tokens = self.tokenize(text, vocabulary)

        if len(tokens) == 1:
            year = self.resolve_year(context_year)
        elif len(tokens) == 2:
            year = parse_year(tokens[1])
            if year is None:
                return None
        else:
            return None

        index = self.lookup(tokens[0], vocabulary)
        if index is None:
            return None
        return Portion(
            text=text,
            code=self.code,
            normalised_text=self.normalise(index, year, vocabulary),
            year=year,
        )
