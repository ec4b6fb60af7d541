"""Command-line entry point.

Analyzes a source file with a classification table file::

    lexicon table.toml program.txt
    lexicon table.json program.txt --pattern "[a-z]+|[0-9]+" --json

Without ``--pattern`` the automaton accepts any lexeme matching one of the
table's patterns. Exit status is 1 when any lexeme was rejected, 2 on a
table or file error.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence

from lexicon.analyzer import LexicalAnalyzer
from lexicon.automaton import RegexAutomaton
from lexicon.config import AnalyzerConfig
from lexicon.errors import LexiconError
from lexicon.serialization import load_table, to_json
from lexicon.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="lexicon",
        description="Classify the lexemes of a source file against a classification table.",
    )
    arg_parser.add_argument("table", help="Classification table (.json or .toml)")
    arg_parser.add_argument("source", help="Source code file path")
    arg_parser.add_argument(
        "-p",
        "--pattern",
        metavar="REGEX",
        help="Regular expression the automaton accepts (default: union of table patterns)",
    )
    arg_parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail on table patterns that do not compile",
    )
    arg_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print tokens as JSON instead of a table",
    )
    arg_parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="Print debugging messages",
    )
    return arg_parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    logger.debug("recv arguments: %s", args.__dict__)

    try:
        table = load_table(args.table)
        if args.pattern is not None:
            automaton = RegexAutomaton(args.pattern)
        else:
            automaton = RegexAutomaton.union(c.pattern for c in table)
        analyzer = LexicalAnalyzer(
            automaton, table, config=AnalyzerConfig(strict_patterns=args.strict)
        )
        with open(args.source, encoding="utf-8") as fp:
            result = analyzer.analyze(fp)
    except (LexiconError, OSError, re.error) as e:
        logger.error("%s", e)
        return 2

    if args.json:
        print(to_json(result.tokens, indent=2))
    else:
        mask = "{:<30}{:<20}"
        print(mask.format("Lexeme", "Attribute"))
        print("-" * 50)
        for token in result.tokens:
            attribute = "ERROR" if token.is_error else token.attribute
            print(mask.format(token.lexeme, attribute))
        print(analyzer)

    for error in result.errors:
        logger.error("line %d: lexeme not accepted: %s", error.line_number, error.lexeme)

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
