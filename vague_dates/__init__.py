"""Vague date engine.

Reads partially known dates such as "1990", "Spring 1990", "3/1990-5/1990",
"January-March 1990" or "Unknown", stores them as a pair of day offsets from
a fixed epoch plus a short format code, and formats stored values back into
the same kind of text.

    >>> from vague_dates import VagueDateInstance
    >>> vd = VagueDateInstance.from_string("March 1990")
    >>> vd.format_code, vd.start_offset, vd.end_offset
    ('O', 32933, 32963)
    >>> str(vd)
    'March 1990'
"""

from vague_dates.classifier import classify_full, get_type
from vague_dates.converter import VagueDateConverter
from vague_dates.date_type import DateType, PortionCode, VagueDateType, from_code, to_code
from vague_dates.decoder import DATE_UNKNOWN, decode_range, to_time_span_days, to_time_span_days_from_string
from vague_dates.encoder import (
    from_date,
    from_date_string,
    from_time_span_days,
    from_vague_date_instance,
    from_vague_date_string,
)
from vague_dates.instance import VagueDateInstance
from vague_dates.portion_parsing import Portion, classify_portion
from vague_dates.seasons import season_day_of_year_bounds, season_index_for, season_string
from vague_dates.splitter import SplitResult, split_date_string
from vague_dates.vocabulary import (
    DEFAULT_VOCABULARY,
    VocabularyError,
    VocabularyTable,
    load_vocabulary,
    vocabulary_from_dict,
)

__all__ = [
    "DATE_UNKNOWN",
    "DEFAULT_VOCABULARY",
    "DateType",
    "Portion",
    "PortionCode",
    "SplitResult",
    "VagueDateConverter",
    "VagueDateInstance",
    "VagueDateType",
    "VocabularyError",
    "VocabularyTable",
    "classify_full",
    "classify_portion",
    "decode_range",
    "from_code",
    "from_date",
    "from_date_string",
    "from_time_span_days",
    "from_vague_date_instance",
    "from_vague_date_string",
    "get_type",
    "load_vocabulary",
    "season_day_of_year_bounds",
    "season_index_for",
    "season_string",
    "split_date_string",
    "to_code",
    "to_time_span_days",
    "to_time_span_days_from_string",
    "vocabulary_from_dict",
]
