"""CLI entrypoint for the word puzzle dictionary tools."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List

from wordgift.core.constants import DEFAULT_MIN_LENGTH, DISCOVERY_MIN_LENGTH
from wordgift.core.exceptions import WordGiftError
from wordgift.data.dictionary import DictionaryConfig, WordDictionary
from wordgift.engine.grid_search import WordSearchGrid
from wordgift.utils.logger import configure_logging, get_logger, resolve_level
from wordgift.utils.pretty import format_grid, print_word_report

LOGGER = get_logger("wordgift.cli")

DEFAULT_DICTIONARY = os.environ.get("WORDGIFT_DICTIONARY", "public/dictionary.txt")

# Discovery commands accept four-letter words; validation stays at five.
DISCOVERY_COMMANDS = frozenset({"rack", "grid"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query the puzzle word list: validate words, search racks and grids",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=DEFAULT_DICTIONARY,
        help="Path or http(s) URL of the newline-delimited word list",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=None,
        help=(
            f"Shortest word accepted into the dictionary (default {DISCOVERY_MIN_LENGTH} "
            f"for rack and grid, {DEFAULT_MIN_LENGTH} otherwise)"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Validate words against the dictionary")
    check.add_argument("words", nargs="+", metavar="WORD")

    prefix = commands.add_parser("prefix", help="Test whether prefixes start any word")
    prefix.add_argument("prefixes", nargs="+", metavar="PREFIX")

    rack = commands.add_parser("rack", help="List every word a letter rack can spell (* is a wildcard)")
    rack.add_argument("letters", nargs="+", metavar="LETTER")

    form = commands.add_parser("form", help="Check whether a word can be built from a rack")
    form.add_argument("letters", type=str, help="Rack letters as one string, e.g. STA*")
    form.add_argument("word", type=str)

    match = commands.add_parser("match", help="Resolve a pattern with one * wildcard")
    match.add_argument("pattern", type=str)

    grid = commands.add_parser("grid", help="Find every word traceable in a word-search grid")
    grid.add_argument("rows", nargs="+", metavar="ROW", help="Grid rows, e.g. STARE HEARS")
    return parser


def resolve_min_length(args: argparse.Namespace) -> int:
    if args.min_length is not None:
        return args.min_length
    if args.command in DISCOVERY_COMMANDS:
        return DISCOVERY_MIN_LENGTH
    return DEFAULT_MIN_LENGTH


def run(args: argparse.Namespace, dictionary: WordDictionary) -> int:
    if args.command == "check":
        for word in args.words:
            print(f"{word.upper()}: {'valid' if dictionary.is_valid_word(word) else 'invalid'}")
        return 0

    if args.command == "prefix":
        for prefix in args.prefixes:
            print(f"{prefix.upper()}: {'yes' if dictionary.has_prefix(prefix) else 'no'}")
        return 0

    if args.command == "rack":
        letters: List[str] = [ch for token in args.letters for ch in token]
        print_word_report(dictionary.find_all_words(letters), label=f"Letters: {', '.join(letters).upper()}")
        return 0

    if args.command == "form":
        result = dictionary.can_form_word(list(args.letters), args.word)
        payload = {
            "can_form": result.can_form,
            "substitutions": [list(item) for item in result.substitutions],
        }
        print(json.dumps(payload))
        return 0 if result.can_form else 1

    if args.command == "match":
        match = dictionary.match_word_pattern(args.pattern)
        if match is None:
            print("no match")
            return 1
        print(json.dumps({"word": match.word, "wildcard_letter": match.wildcard_letter}))
        return 0

    if args.command == "grid":
        grid = WordSearchGrid.from_strings(args.rows)
        print(format_grid(grid))
        print_word_report(grid.find_words(dictionary))
        return 0

    raise ValueError(f"Unknown command {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(resolve_level(args.log_level))

    source = args.dictionary
    if not source.lower().startswith(("http://", "https://")):
        source = Path(source)
    dictionary = WordDictionary(DictionaryConfig(source=source, min_length=resolve_min_length(args)))
    try:
        dictionary.load()
        return run(args, dictionary)
    except WordGiftError as exc:
        LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
