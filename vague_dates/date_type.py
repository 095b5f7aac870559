"""Format codes describing how each half of a vague date was written."""

from enum import Enum


class PortionCode:
    """Single-character codes for one half (portion) of a vague date."""
    DATE = "D"           # Exact calendar date
    MONTH_YEAR = "O"     # Month and year
    YEAR = "Y"           # Year only
    SEASON = "P"         # Season and year
    UNKNOWN = "U"        # Explicitly unknown


ABSENT_CODE = "-"

KNOWN_PORTION_CODES = frozenset(
    {PortionCode.DATE, PortionCode.MONTH_YEAR, PortionCode.YEAR, PortionCode.SEASON}
)


class DateType(Enum):
    """Which side of a vague date an operation addresses."""
    START = "start"
    END = "end"
    VAGUE = "vague"


class VagueDateType(Enum):
    """Combined format codes, as stored alongside the day offsets."""
    START_DATE = "D"
    START_AND_END_DATES = "DD"
    START_DATE_RANGE = "D-"
    END_DATE_RANGE = "-D"
    START_MONTH_AND_YEAR = "O"
    START_AND_END_MONTH_AND_YEAR = "OO"
    START_MONTH_RANGE = "O-"
    END_MONTH_RANGE = "-O"
    START_YEAR = "Y"
    START_AND_END_YEAR = "YY"
    START_YEAR_RANGE = "Y-"
    END_YEAR_RANGE = "-Y"
    START_SEASON = "P"
    START_AND_END_SEASON = "PP"
    START_SEASON_RANGE = "P-"
    END_SEASON_RANGE = "-P"
    UNKNOWN = "U"


_CODE_TO_TYPE = {member.value: member for member in VagueDateType}


def to_code(vague_date_type: VagueDateType) -> str:
    return vague_date_type.value


def from_code(code: str | None) -> VagueDateType:
    """Look up the enumeration member for a format code.

    Mixed codes such as "DY" are valid format codes but have no member of
    their own; they, and anything unrecognised, map to UNKNOWN.
    """
    if not code:
        return VagueDateType.UNKNOWN
    return _CODE_TO_TYPE.get(code, VagueDateType.UNKNOWN)


def is_unknown_code(format_code: str | None) -> bool:
    return not format_code or format_code == PortionCode.UNKNOWN


def start_code(format_code: str | None) -> str:
    if not format_code:
        return ""
    return format_code[0]


def end_code(format_code: str | None) -> str:
    # One-character codes describe both halves.
    if not format_code:
        return ""
    return format_code[-1]


def side_code(format_code: str | None, side: DateType) -> str:
    if side == DateType.END:
        return end_code(format_code)
    return start_code(format_code)


def is_valid_format_code(format_code: str | None) -> bool:
    """True for "" and for one/two-character codes over the code alphabet."""
    if format_code is None:
        return False
    if format_code in ("", PortionCode.UNKNOWN):
        return True
    if len(format_code) == 1:
        return format_code in KNOWN_PORTION_CODES
    if len(format_code) != 2 or format_code == ABSENT_CODE * 2:
        return False
    allowed = KNOWN_PORTION_CODES | {ABSENT_CODE}
    return all(c in allowed for c in format_code)
