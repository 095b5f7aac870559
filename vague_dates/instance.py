"""The stored form of a vague date."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from vague_dates.classifier import get_type
from vague_dates.date_type import DateType, PortionCode, VagueDateType, from_code
from vague_dates.decoder import DATE_UNKNOWN, decode_range
from vague_dates.encoder import from_vague_date_instance
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VagueDateInstance:
    """A vague date as persisted: two day offsets and a format code.

    Attributes:
        start_offset: Days from the base epoch to the first day, or DATE_UNKNOWN
        end_offset: Days from the base epoch to the last day, or DATE_UNKNOWN
        format_code: "", "U", or a one/two character code such as "O" or "Y-"
        raw_entry: The text as typed; kept only when it could not be read
    """
    start_offset: int = DATE_UNKNOWN
    end_offset: int = DATE_UNKNOWN
    format_code: str = ""
    raw_entry: str | None = None

    @classmethod
    def unknown(cls) -> "VagueDateInstance":
        return cls()

    @classmethod
    def from_string(cls, raw: str | None, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> "VagueDateInstance":
        """Read user text into an instance.

        Text that cannot be read gives a bad instance that keeps the text
        verbatim so it can be shown back to the user unchanged.
        """
        format_code, normalised = get_type(raw, vocabulary)
        return cls.from_classified(raw, format_code, normalised, vocabulary)

    @classmethod
    def from_classified(
        cls,
        raw: str | None,
        format_code: str,
        normalised: str,
        vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
    ) -> "VagueDateInstance":
        """Build an instance from the result of get_type(raw)."""
        if not format_code:
            if raw and raw.strip():
                logger.debug("Keeping unreadable vague date entry %r", raw)
                return cls(format_code="", raw_entry=raw)
            return cls.unknown()

        start, end = decode_range(normalised, format_code, vocabulary)
        instance = cls(start_offset=start, end_offset=end, format_code=format_code)
        if instance.is_inverted:
            logger.warning("Vague date %r ends before it starts", raw)
        return instance

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VagueDateInstance":
        start = data.get("start_offset")
        end = data.get("end_offset")
        return cls(
            start_offset=DATE_UNKNOWN if start is None else int(start),
            end_offset=DATE_UNKNOWN if end is None else int(end),
            format_code=data.get("format_code") or "",
            raw_entry=data.get("raw_entry"),
        )

    @property
    def is_unknown(self) -> bool:
        return not self.format_code or self.format_code == PortionCode.UNKNOWN

    @property
    def is_bad(self) -> bool:
        """True when text was entered but could not be read as a vague date."""
        return not self.format_code and bool(self.raw_entry)

    @property
    def is_inverted(self) -> bool:
        """True when both offsets are known and the end precedes the start."""
        return (
            self.start_offset != DATE_UNKNOWN
            and self.end_offset != DATE_UNKNOWN
            and self.start_offset > self.end_offset
        )

    @property
    def format_type(self) -> VagueDateType:
        return from_code(self.format_code)

    def to_string(
        self,
        output_format: DateType = DateType.VAGUE,
        vocabulary: VocabularyTable = DEFAULT_VOCABULARY,
    ) -> str:
        if self.is_bad:
            return self.raw_entry or ""
        if self.is_unknown:
            return vocabulary.unknown_literal
        return from_vague_date_instance(self, output_format, vocabulary)

    def to_dict(self) -> dict[str, Any]:
        """The scalar fields a persistence layer stores."""
        result: dict[str, Any] = {
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "format_code": self.format_code,
        }
        if self.is_bad:
            result["raw_entry"] = self.raw_entry
        return result

    def __str__(self) -> str:
        return self.to_string()
