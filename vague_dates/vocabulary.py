"""Vocabulary table for vague date parsing and formatting.

The vocabulary holds the locale-specific words the engine reads and writes:
month names, abbreviated month names, the four season names, the range
delimiter and the unknown-date literal, plus the base epoch all stored
offsets are counted from. It is supplied once at startup and never mutated.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Sequence

import jsonschema


logger = logging.getLogger(__name__)


_DEFAULT_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DEFAULT_ABBREVIATED_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DEFAULT_SEASON_NAMES = ("Spring", "Summer", "Autumn", "Winter")
_DEFAULT_DELIMITER = "-"
_DEFAULT_UNKNOWN_LITERAL = "Unknown"
# COM/OLE automation base date
_DEFAULT_BASE_EPOCH = date(1899, 12, 30)
_DEFAULT_DATE_SEPARATOR = "/"
_DAY_FIRST_SHORT_DATE_FORMAT = "%d/%m/%Y"
_MONTH_FIRST_SHORT_DATE_FORMAT = "%m/%d/%Y"

_ENV_VOCABULARY_FILE = "VAGUE_DATES_VOCABULARY"
_ENV_DELIMITER = "VAGUE_DATES_DELIMITER"
_ENV_UNKNOWN_LITERAL = "VAGUE_DATES_UNKNOWN_LITERAL"
_ENV_DAY_FIRST = "VAGUE_DATES_DAY_FIRST"


class VocabularyError(ValueError):
    """Raised when a vocabulary table is malformed."""


def _default_short_date_format(day_first: bool) -> str:
    return _DAY_FIRST_SHORT_DATE_FORMAT if day_first else _MONTH_FIRST_SHORT_DATE_FORMAT


def _find_single(names: Sequence[str], text: str) -> int | None:
    """Return the index of the only name equal to text (case-insensitive)."""
    needle = text.casefold()
    matches = [i for i, name in enumerate(names) if name.casefold() == needle]
    if len(matches) != 1:
        return None
    return matches[0]


@dataclass(frozen=True)
class VocabularyTable:
    month_names: tuple[str, ...] = _DEFAULT_MONTH_NAMES
    abbreviated_month_names: tuple[str, ...] = _DEFAULT_ABBREVIATED_MONTH_NAMES
    season_names: tuple[str, ...] = _DEFAULT_SEASON_NAMES
    delimiter: str = _DEFAULT_DELIMITER
    unknown_literal: str = _DEFAULT_UNKNOWN_LITERAL
    base_epoch: date = field(default=_DEFAULT_BASE_EPOCH)
    date_separator: str = _DEFAULT_DATE_SEPARATOR
    day_first: bool = True
    # None follows day_first.
    short_date_format: str | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers but store immutable tuples.
        for name in ("month_names", "abbreviated_month_names", "season_names"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.short_date_format is None:
            object.__setattr__(self, "short_date_format", _default_short_date_format(self.day_first))
        self.validate()

    def validate(self) -> None:
        """Fail fast on configuration the engine cannot work with."""
        errors: list[str] = []
        if len(self.month_names) != 12:
            errors.append(f"expected 12 month names, got {len(self.month_names)}")
        if len(self.abbreviated_month_names) != 12:
            errors.append(
                f"expected 12 abbreviated month names, got {len(self.abbreviated_month_names)}"
            )
        if len(self.season_names) != 4:
            errors.append(f"expected 4 season names, got {len(self.season_names)}")
        for label, names in (
            ("month", self.month_names),
            ("abbreviated month", self.abbreviated_month_names),
            ("season", self.season_names),
        ):
            if any(not n or not n.strip() for n in names):
                errors.append(f"{label} names must not be blank")

        if not self.delimiter:
            errors.append("a vague date delimiter character is required")
        elif len(self.delimiter) > 1:
            errors.append("vague date delimiter must be a single character")
        elif self.delimiter.isalnum() or self.delimiter.isspace():
            errors.append("vague date delimiter must not be a letter, digit or space")
        elif self.delimiter == self.date_separator:
            errors.append("vague date delimiter must differ from the date separator")

        if not self.unknown_literal or not self.unknown_literal.strip():
            errors.append("unknown literal must not be blank")
        if not self.date_separator:
            errors.append("date separator must not be empty")

        fmt = self.short_date_format
        if "%d" in fmt and "%m" in fmt and (fmt.index("%d") < fmt.index("%m")) != self.day_first:
            errors.append("short date format must put the day first exactly when day_first is set")

        if errors:
            raise VocabularyError("Invalid vocabulary: " + "; ".join(errors))

    def month_index(self, name: str) -> int | None:
        return _find_single(self.month_names, name)

    def abbreviated_month_index(self, name: str) -> int | None:
        return _find_single(self.abbreviated_month_names, name)

    def season_index(self, name: str) -> int | None:
        return _find_single(self.season_names, name)

    def is_unknown_text(self, text: str | None) -> bool:
        """True for None or any case-insensitive prefix of the unknown literal.

        "U", "unk" and "UNKNOWN" all count; the empty string does not.
        """
        if text is None:
            return True
        t = text.strip()
        if not t or len(t) > len(self.unknown_literal):
            return False
        return self.unknown_literal[: len(t)].casefold() == t.casefold()


DEFAULT_VOCABULARY = VocabularyTable()


def _load_vocabulary_schema() -> dict:
    schema_path = os.path.join(os.path.dirname(__file__), "vocabulary_schema.json")
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes")


def vocabulary_from_dict(data: dict[str, Any]) -> VocabularyTable:
    """Build a table from a JSON-style mapping, falling back to the defaults.

    Raises:
        VocabularyError: if the mapping violates the vocabulary schema or
            describes an unusable table.
    """
    try:
        jsonschema.validate(instance=data, schema=_load_vocabulary_schema())
    except jsonschema.ValidationError as e:
        raise VocabularyError(f"Invalid vocabulary: {e.message}") from e

    kwargs: dict[str, Any] = dict(data)
    if "base_epoch" in kwargs:
        try:
            kwargs["base_epoch"] = date.fromisoformat(kwargs["base_epoch"])
        except ValueError as e:
            raise VocabularyError(f"Invalid vocabulary: bad base_epoch {data['base_epoch']!r}") from e
    return VocabularyTable(**kwargs)


def load_vocabulary(path: str | os.PathLike | None = None) -> VocabularyTable:
    """Load the vocabulary from a JSON file and environment overrides.

    The file comes from ``path`` or the VAGUE_DATES_VOCABULARY environment
    variable. VAGUE_DATES_DELIMITER, VAGUE_DATES_UNKNOWN_LITERAL and
    VAGUE_DATES_DAY_FIRST override single entries; overriding day_first also
    switches the short date format unless the file sets one. With nothing
    configured the default English table is returned.
    """
    path = path or os.getenv(_ENV_VOCABULARY_FILE) or None
    data: dict[str, Any] = {}

    if path:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise VocabularyError(f"Invalid vocabulary file {path}: {e}") from e
        vocabulary = vocabulary_from_dict(data)
        logger.info("Loaded vague date vocabulary from %s", path)
    else:
        vocabulary = DEFAULT_VOCABULARY

    overrides: dict[str, Any] = {}
    delimiter = os.getenv(_ENV_DELIMITER)
    if delimiter is not None and delimiter.strip():
        overrides["delimiter"] = delimiter.strip()
    unknown_literal = os.getenv(_ENV_UNKNOWN_LITERAL)
    if unknown_literal is not None and unknown_literal.strip():
        overrides["unknown_literal"] = unknown_literal.strip()
    if os.getenv(_ENV_DAY_FIRST) is not None:
        day_first = _parse_bool(os.getenv(_ENV_DAY_FIRST), vocabulary.day_first)
        overrides["day_first"] = day_first
        # An explicit format from the file must still agree; validate() checks it.
        if "short_date_format" not in data:
            overrides["short_date_format"] = _default_short_date_format(day_first)

    if overrides:
        logger.info("Applying vocabulary overrides from environment: %s", sorted(overrides))
        vocabulary = replace(vocabulary, **overrides)
    return vocabulary
