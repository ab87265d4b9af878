# cnf/__init__.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Sentence parsing and formatting components for propositional logic

"""Propositional sentence parsing and formatting.

This package turns sentences written in a small textual grammar into
immutable abstract syntax trees and back. The grammar uses single-letter
variables, ``~`` for negation, ``v`` for disjunction, ``^`` for
conjunction and parentheses for grouping; whitespace is insignificant.

Core Functions:
    parse: Parse text into the most direct sentence tree
    parse_cnf: Parse text into a strict Conjunction of Disjunctions
    parse_file, parse_cnf_file: The same, reading the text from a file
    format_sentence: Render a tree back to text
    is_cnf: Check a tree for strict CNF shape

Example:
    >>> from cnf import parse, format_sentence
    >>> tree = parse("(A v ~B) ^ C")
    >>> format_sentence(tree)
    '(A v ~B) ^ C'
"""

from .exceptions import (
    ParseError,
    MissingVariable,
    UnexpectedLiteral,
    ParenthesisMismatch,
    NumericParseError,
)
from .ast_nodes import (
    Expr,
    Sentence,
    Variable,
    Negation,
    Disjunction,
    Conjunction,
    Visitor,
    is_cnf,
)
from .grammar import _SentenceParser
from .formatter import SentenceFormatter, format_sentence
from utils.logger import get_logger
from utils.sentence_io import read_sentence_file


def _run(source: str, strict: bool):
    logger = get_logger()
    try:
        parser = _SentenceParser(source)
        result = parser.parse_cnf() if strict else parser.parse()
        logger.sentence_parsed(type(result).__name__, source)
        return result

    except ParseError as exc:
        logger.debug(f"{type(exc).__name__} encountered during parsing: {exc}")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse(source: str) -> Expr:
    """Parse a sentence string into an Abstract Syntax Tree.

    Conjunction binds loosest, then disjunction, then negation. Groups of
    a single element are returned as that element, so ``parse("A")`` is a
    Variable and ``parse("A v B")`` a Disjunction. Parenthesized groups
    may nest any sentence, e.g. ``(A ^ B) v C``.

    Args:
        source: Sentence text

    Returns:
        Root node of the parsed sentence

    Raises:
        MissingVariable: An operand position is empty
        UnexpectedLiteral: An operand is not a single letter
        ParenthesisMismatch: Parentheses are unbalanced
    """
    get_logger().debug(f"Parsing sentence: {source!r}")
    return _run(source, strict=False)


def parse_cnf(source: str) -> Conjunction:
    """Parse a sentence string as a strict CNF formula.

    The result is always a Conjunction of Disjunctions of literals, even
    for a single clause or a single literal.

    Args:
        source: CNF sentence text

    Returns:
        Conjunction node

    Raises:
        ParseError: As for ``parse``; a grouped sub-sentence where a
            literal is expected raises UnexpectedLiteral
    """
    get_logger().debug(f"Parsing CNF sentence: {source!r}")
    return _run(source, strict=True)


def parse_file(path) -> Expr:
    """Read a whole file and ``parse`` its contents.

    Raises:
        SentenceIOError: The file could not be read
        ParseError: The contents are not a valid sentence
    """
    return parse(read_sentence_file(path))


def parse_cnf_file(path) -> Conjunction:
    """Read a whole file and ``parse_cnf`` its contents.

    Raises:
        SentenceIOError: The file could not be read
        ParseError: The contents are not a valid CNF sentence
    """
    return parse_cnf(read_sentence_file(path))


__all__ = [
    "parse",
    "parse_cnf",
    "parse_file",
    "parse_cnf_file",
    "format_sentence",
    "SentenceFormatter",
    "is_cnf",
    "Expr",
    "Sentence",
    "Variable",
    "Negation",
    "Disjunction",
    "Conjunction",
    "Visitor",
    "ParseError",
    "MissingVariable",
    "UnexpectedLiteral",
    "ParenthesisMismatch",
    "NumericParseError",
]

__version__ = "1.0.0"
__description__ = "Propositional sentence parsing and formatting components"
