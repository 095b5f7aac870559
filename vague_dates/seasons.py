"""Season arithmetic for vague dates.

Seasons are fixed, meteorological-style quarters of the year, expressed as
day offsets from 1 January:

    index  season   start   end
    0      Spring     80    170
    1      Summer    172    264
    2      Autumn    266    353
    3      Winter    355     78 (of the following year)

Winter is the only season that crosses a year boundary. A winter is always
named by the year it starts in, so 10 January 2001 is "Winter 2000".

When classifying a date, leap years are folded onto the non-leap table by
dropping one day from every day-of-year after 29 February.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


SPRING = 0
SUMMER = 1
AUTUMN = 2
WINTER = 3

_SEASON_BOUNDS: tuple[tuple[int, int], ...] = (
    (80, 170),
    (172, 264),
    (266, 353),
    (355, 78),
)

# Day-of-year (1-based, leap-corrected) at which each season begins.
_SPRING_FROM = 80
_SUMMER_FROM = 172
_AUTUMN_FROM = 266
_WINTER_FROM = 355

# Day-of-year of 28 February; later days shift by one in leap years.
_LAST_DAY_BEFORE_LEAP_DAY = 59


def season_day_of_year_bounds(season_index: int) -> tuple[int, int]:
    """Return (start_days, end_days) offsets from 1 January for a season.

    Winter's end offset counts from 1 January of the following year.

    Raises:
        IndexError: if season_index is not 0..3.
    """
    if not 0 <= season_index < len(_SEASON_BOUNDS):
        raise IndexError(f"season index out of range: {season_index}")
    return _SEASON_BOUNDS[season_index]


def season_start(season_index: int, year: int) -> date:
    start_days, _ = season_day_of_year_bounds(season_index)
    return date(year, 1, 1) + timedelta(days=start_days)


def season_end(season_index: int, year: int) -> date:
    _, end_days = season_day_of_year_bounds(season_index)
    if season_index == WINTER:
        return date(year + 1, 1, 1) + timedelta(days=end_days)
    return date(year, 1, 1) + timedelta(days=end_days)


def _normalised_day_of_year(d: date) -> int:
    doy = d.timetuple().tm_yday
    if calendar.isleap(d.year) and doy > _LAST_DAY_BEFORE_LEAP_DAY:
        doy -= 1
    return doy


def season_index_for(d: date) -> int:
    doy = _normalised_day_of_year(d)
    if doy < _SPRING_FROM or doy >= _WINTER_FROM:
        return WINTER
    if doy < _SUMMER_FROM:
        return SPRING
    if doy < _AUTUMN_FROM:
        return SUMMER
    return AUTUMN


def season_year_for(d: date) -> int:
    """Year the season containing d started in."""
    if season_index_for(d) == WINTER and _normalised_day_of_year(d) < _SPRING_FROM:
        return d.year - 1
    return d.year


def season_string(d: date, vocabulary: VocabularyTable = DEFAULT_VOCABULARY) -> str:
    """Format a date as "<Season> <year>", e.g. "Winter 1989" for 10 Jan 1990."""
    name = vocabulary.season_names[season_index_for(d)]
    year = season_year_for(d)
    # A season starting in date.max.year belongs to the unknown era; show the name alone.
    if year == date.max.year:
        return name
    return f"{name} {year}"
