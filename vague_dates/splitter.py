"""Split a vague date string into its start and end portions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


@dataclass(frozen=True)
class SplitResult:
    """Outcome of splitting a vague date on the range delimiter."""
    start_text: str
    end_text: str
    delimiter_found: bool
    segment_count: int

    @property
    def is_valid(self) -> bool:
        """A vague date has at most a start and an end portion."""
        return self.segment_count <= 2


@lru_cache(maxsize=8)
def _delimiter_re(delimiter: str) -> re.Pattern[str]:
    return re.compile(r"\s*" + re.escape(delimiter) + r"\s*")


def split_date_string(raw: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> SplitResult:
    """Split raw text on the vocabulary's delimiter, tolerating whitespace around it.

    "3/1990 - 5/1990" -> ("3/1990", "5/1990", True, 2)
    "1990-"           -> ("1990", "", True, 2)
    "1990"            -> ("1990", "", False, 1)
    "1-2-3"           -> ("1", "", True, 3), which is not valid
    """
    if not raw or not raw.strip():
        return SplitResult(start_text="", end_text="", delimiter_found=False, segment_count=0)

    text = raw.strip()
    parts = _delimiter_re(vocabulary.delimiter).split(text)

    end_text = parts[1] if len(parts) == 2 else ""
    return SplitResult(
        start_text=parts[0],
        end_text=end_text,
        delimiter_found=vocabulary.delimiter in raw,
        segment_count=len(parts),
    )
