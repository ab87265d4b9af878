#!/usr/bin/env python3
# random_cnf.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Command-line interface for random 3-SAT instance generation

import sys
import math
import random
import argparse
from typing import List, Optional

from cnf import parse_cnf, format_sentence
from cnf.exceptions import NumericParseError
from generator import NUM_VARIABLES, clause_count_for_ratio, random_instance
from utils.logger import configure_logging, get_logger
from utils.sentence_io import SentenceIOError, write_sentence_file


def parse_ratio(text: str) -> float:
    """Convert the clause/variable ratio argument to a float.

    Args:
        text: Raw command-line argument

    Returns:
        The ratio as a finite float

    Raises:
        NumericParseError: If the argument is not a finite number
    """
    try:
        ratio = float(text)
    except ValueError as e:
        raise NumericParseError(f"Invalid clause/variable ratio: {text!r}") from e

    if not math.isfinite(ratio):
        raise NumericParseError(f"Clause/variable ratio must be finite: {text!r}")
    return ratio


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="random-cnf",
        description="Generate a random 3-SAT instance over the variables A-Z",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  random-cnf 2.2                   # 57 clauses to standard output
  random-cnf 2.2 mysentence.cnf    # 57 clauses written to mysentence.cnf
  random-cnf 4.3 hard.cnf --seed 7 --multiline
        """,
    )

    # Positional arguments are validated by hand so a wrong count prints usage
    parser.add_argument(
        "ratio", nargs="?", help="Ratio of clauses to variables, e.g. 2.2"
    )
    parser.add_argument(
        "output", nargs="?", help="File to write; standard output if omitted"
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output"
    )

    parser.add_argument(
        "--multiline", action="store_true", help="Write one clause per line"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for instance generation.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None

    Returns:
        Exit code (0 for success, 1 for usage or write errors)

    Raises:
        NumericParseError: The ratio argument is not a number
    """
    parser = create_argument_parser()
    args, extra = parser.parse_known_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    if args.ratio is None or extra:
        parser.print_usage()
        return 1

    ratio = parse_ratio(args.ratio)
    clause_count = clause_count_for_ratio(ratio, NUM_VARIABLES)
    logger.info(f"Generating {clause_count} clauses (ratio {ratio})")

    instance = random_instance(clause_count, random.Random(args.seed))
    if args.multiline:
        instance = format_sentence(parse_cnf(instance), multiline=True)

    if args.output is None:
        print(instance)
        return 0

    try:
        write_sentence_file(args.output, instance)
    except SentenceIOError as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"Instance written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
