"""Factory for creating portion parser strategies."""

from enum import Enum, auto

from vague_dates.portion_parsing.strategy import PortionParserStrategy


class PortionParsers(Enum):
    """Enumeration of available portion parsing strategies."""
    UNKNOWN = auto()
    NUMERIC = auto()
    MONTH_NAME = auto()
    ABBREVIATED_MONTH_NAME = auto()
    SEASON_NAME = auto()
    FULL_DATE = auto()


class PortionParserFactory:
    """Factory for creating PortionParserStrategy instances."""

    @staticmethod
    def get_parser(strategy: PortionParsers) -> PortionParserStrategy:
        """Get a parser instance for the specified strategy.

        Raises:
            ValueError: If the strategy is unknown
        """
        # Import here to avoid circular dependencies
        from vague_dates.portion_parsing.unknown_parser import UnknownPortionParser
        from vague_dates.portion_parsing.numeric_parser import NumericPortionParser
        from vague_dates.portion_parsing.month_name_parser import MonthNamePortionParser
        from vague_dates.portion_parsing.abbreviated_month_parser import AbbreviatedMonthPortionParser
        from vague_dates.portion_parsing.season_parser import SeasonPortionParser
        from vague_dates.portion_parsing.full_date_parser import FullDatePortionParser

        if strategy == PortionParsers.UNKNOWN:
            return UnknownPortionParser()
        elif strategy == PortionParsers.NUMERIC:
            return NumericPortionParser()
        elif strategy == PortionParsers.MONTH_NAME:
            return MonthNamePortionParser()
        elif strategy == PortionParsers.ABBREVIATED_MONTH_NAME:
            return AbbreviatedMonthPortionParser()
        elif strategy == PortionParsers.SEASON_NAME:
            return SeasonPortionParser()
        elif strategy == PortionParsers.FULL_DATE:
            return FullDatePortionParser()
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
