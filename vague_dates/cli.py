"""
Vague date command line tool

Reads vague date expressions and shows how they are classified, stored and
displayed.

Usage:
    vague-dates parse "Spring 1990" "3/1990-5/1990"
    vague-dates format 32933 32963 O --mode vague
    vague-dates season 1990-01-10

Options:
    --vocabulary PATH: JSON vocabulary file (month, season names, delimiter)
    --verbose: Log classification details
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, timedelta
from typing import Any

from vague_dates.classifier import get_type
from vague_dates.date_type import DateType
from vague_dates.decoder import DATE_UNKNOWN
from vague_dates.encoder import from_time_span_days
from vague_dates.instance import VagueDateInstance
from vague_dates.seasons import season_string
from vague_dates.vocabulary import VocabularyError, VocabularyTable, load_vocabulary


logger = logging.getLogger(__name__)

_MODES = {
    "start": DateType.START,
    "end": DateType.END,
    "vague": DateType.VAGUE,
}


def _offset_iso(days: int, vocabulary: VocabularyTable) -> str | None:
    if days == DATE_UNKNOWN:
        return None
    return (vocabulary.base_epoch + timedelta(days=days)).isoformat()


def describe(text: str, vocabulary: VocabularyTable) -> dict[str, Any]:
    """Summarise how one vague date expression is read."""
    format_code, normalised = get_type(text, vocabulary)
    instance = VagueDateInstance.from_classified(text, format_code, normalised, vocabulary)
    return {
        "input": text,
        "format_code": instance.format_code,
        "normalised": normalised,
        "start_offset": instance.start_offset,
        "end_offset": instance.end_offset,
        "start_date": _offset_iso(instance.start_offset, vocabulary),
        "end_date": _offset_iso(instance.end_offset, vocabulary),
        "is_unknown": instance.is_unknown,
        "is_bad": instance.is_bad,
        "display": instance.to_string(DateType.VAGUE, vocabulary),
    }


def _cmd_parse(args: argparse.Namespace, vocabulary: VocabularyTable) -> int:
    for text in args.text:
        print(json.dumps(describe(text, vocabulary), ensure_ascii=False))
    return 0


def _cmd_format(args: argparse.Namespace, vocabulary: VocabularyTable) -> int:
    print(from_time_span_days(args.start, args.end, args.code, _MODES[args.mode], vocabulary))
    return 0


def _cmd_season(args: argparse.Namespace, vocabulary: VocabularyTable) -> int:
    try:
        d = date.fromisoformat(args.date)
    except ValueError:
        print(f"Invalid date '{args.date}', expected YYYY-MM-DD", file=sys.stderr)
        return 1
    print(season_string(d, vocabulary))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vague-dates", description="Read and format vague dates.")
    parser.add_argument("--vocabulary", default=None, help="JSON vocabulary file.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="Classify and decode vague date text.")
    p_parse.add_argument("text", nargs="+")

    p_format = sub.add_parser("format", help="Format stored day offsets.")
    p_format.add_argument("start", type=int)
    p_format.add_argument("end", type=int)
    p_format.add_argument("code")
    p_format.add_argument("--mode", choices=sorted(_MODES), default="vague")

    p_season = sub.add_parser("season", help="Name the season of an ISO date.")
    p_season.add_argument("date")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s",
    )

    try:
        vocabulary = load_vocabulary(args.vocabulary)
    except (OSError, VocabularyError) as e:
        logger.debug("Vocabulary load failed", exc_info=True)
        print(f"Cannot load vocabulary: {e}", file=sys.stderr)
        return 1

    if args.cmd == "parse":
        return _cmd_parse(args, vocabulary)
    if args.cmd == "format":
        return _cmd_format(args, vocabulary)
    if args.cmd == "season":
        return _cmd_season(args, vocabulary)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    sys.exit(main())
