"""Two-way conversion between stored vague dates and editable text."""

from __future__ import annotations

from vague_dates.date_type import DateType
from vague_dates.instance import VagueDateInstance
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


class VagueDateConverter:
    """Binds a VagueDateInstance to a text field.

    convert() renders a stored value for editing; convert_back() reads the
    edited text into a new instance. Unreadable text round-trips unchanged.
    """

    def __init__(self, vocabulary: VocabularyTable = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary

    def convert(self, instance: VagueDateInstance | None) -> str | None:
        """Store to display."""
        if instance is None:
            return None
        if instance.is_bad:
            return instance.raw_entry
        if instance.is_unknown:
            return self.vocabulary.unknown_literal
        return instance.to_string(DateType.VAGUE, self.vocabulary)

    def convert_back(self, text: str | None) -> VagueDateInstance | None:
        """Display to store."""
        if text is None:
            return None
        return VagueDateInstance.from_string(text, self.vocabulary)
