# generator/random_instance.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Random k-literal CNF instance generation

"""Random 3-SAT instance generation.

Instances are produced directly as text in the sentence grammar: clauses
of ``clause_width`` literals joined by ``^``, each clause parenthesized,
e.g. ``(A v ~Q v C) ^ (~Z v B v B)``. Every literal draws its letter
uniformly from the alphabet and is negated with probability 0.5. Letters
may repeat within a clause.

Randomness always comes from an explicit ``random.Random`` so callers can
seed it for reproducible benchmarks.
"""

import math
import random
import string
from typing import Optional, Sequence

from cnf.lexer import AND_SYMBOL, NEG_SYMBOL, OR_SYMBOL
from utils.logger import get_logger

NUM_VARIABLES = 26
LITERALS_PER_CLAUSE = 3
NEGATION_PROBABILITY = 0.5
VARIABLE_ALPHABET = tuple(string.ascii_uppercase)


def random_literal(
    rng: random.Random, alphabet: Sequence[str] = VARIABLE_ALPHABET
) -> str:
    """Return one literal: a uniformly drawn letter, negated half the time."""
    negated = rng.random() < NEGATION_PROBABILITY
    letter = rng.choice(alphabet)
    return f"{NEG_SYMBOL}{letter}" if negated else letter


def random_clause(
    rng: random.Random,
    alphabet: Sequence[str] = VARIABLE_ALPHABET,
    clause_width: int = LITERALS_PER_CLAUSE,
) -> str:
    """Return one parenthesized disjunction of ``clause_width`` literals."""
    literals = (random_literal(rng, alphabet) for _ in range(clause_width))
    return "(" + f" {OR_SYMBOL} ".join(literals) + ")"


def random_instance(
    clause_count: int,
    rng: Optional[random.Random] = None,
    alphabet: Sequence[str] = VARIABLE_ALPHABET,
    clause_width: int = LITERALS_PER_CLAUSE,
) -> str:
    """Generate a random CNF instance as sentence text.

    Args:
        clause_count: Number of clauses, at least 1
        rng: Source of randomness; a fresh unseeded ``random.Random`` is
            created when omitted
        alphabet: Variable letters to draw from (default A-Z)
        clause_width: Literals per clause (default 3)

    Returns:
        Text of the form ``(L v L v L) ^ (L v L v L) ^ ...``

    Raises:
        ValueError: If clause_count or clause_width is not positive, or the
            alphabet is empty
    """
    if isinstance(clause_count, bool) or not isinstance(clause_count, int):
        raise ValueError(f"clause_count must be an integer, got {clause_count!r}")
    if clause_count < 1:
        raise ValueError(f"clause_count must be positive, got {clause_count}")
    if clause_width < 1:
        raise ValueError(f"clause_width must be positive, got {clause_width}")
    if not alphabet:
        raise ValueError("alphabet must contain at least one variable")

    if rng is None:
        rng = random.Random()

    clauses = [random_clause(rng, alphabet, clause_width) for _ in range(clause_count)]

    get_logger().instance_generated(clause_count, clause_width, len(alphabet))
    return f" {AND_SYMBOL} ".join(clauses)


def clause_count_for_ratio(ratio: float, num_variables: int = NUM_VARIABLES) -> int:
    """Number of clauses for a clause/variable ratio, never less than one.

    Example:
        >>> clause_count_for_ratio(2.2)
        57
    """
    # Halves round up, unlike the builtin round()
    return max(1, math.floor(ratio * num_variables + 0.5))
