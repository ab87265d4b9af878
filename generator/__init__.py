# generator/__init__.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Random benchmark instance generation

from .random_instance import (
    NUM_VARIABLES,
    LITERALS_PER_CLAUSE,
    NEGATION_PROBABILITY,
    VARIABLE_ALPHABET,
    random_literal,
    random_clause,
    random_instance,
    clause_count_for_ratio,
)

__all__ = [
    "NUM_VARIABLES",
    "LITERALS_PER_CLAUSE",
    "NEGATION_PROBABILITY",
    "VARIABLE_ALPHABET",
    "random_literal",
    "random_clause",
    "random_instance",
    "clause_count_for_ratio",
]
