"""Portion parsing for vague dates.

Each half of a vague date ("Spring 1990", "3", "1/3/1990") is classified by
trying a fixed sequence of grammar-specific parsers until one matches.
"""

from vague_dates.portion_parsing.portion import Portion
from vague_dates.portion_parsing.strategy import PortionParserStrategy
from vague_dates.portion_parsing.factory import PortionParsers, PortionParserFactory
from vague_dates.portion_parsing.portion_classifier import classify_portion

__all__ = [
    "Portion",
    "PortionParserStrategy",
    "PortionParsers",
    "PortionParserFactory",
    "classify_portion",
]
