# cnf/ast_nodes.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Abstract Syntax Tree node classes for propositional sentences

"""AST node classes for representing parsed propositional sentences.

This module defines immutable and hashable node classes for the closed set
of sentence variants. Equality is structural: two trees are equal iff they
have the same variant and recursively equal children, in order.

Node Types:
    Variable: Single-letter propositional variable
    Negation: Logical NOT of one operand
    Disjunction, Conjunction: N-ary OR / AND over an ordered tuple

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Protocol, Tuple, Union

# Letters reserved as operator symbols and never usable as variables
RESERVED_LETTERS = frozenset("v")


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each node type,
    which keeps every consumer exhaustive over the closed set of variants.
    """

    def visit_variable(self, n: Variable): ...

    def visit_negation(self, n: Negation): ...

    def visit_disjunction(self, n: Disjunction): ...

    def visit_conjunction(self, n: Conjunction): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all sentence nodes.

    Concrete node types implement ``accept`` for visitor dispatch. The
    string form of every node is its canonical rendering in the textual
    grammar.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def variables(self) -> FrozenSet[str]:
        """Return the set of variable letters occurring in this sentence."""
        raise NotImplementedError

    def is_literal(self) -> bool:
        """Return True for a Variable or the Negation of a Variable."""
        return False

    def __str__(self) -> str:
        from .formatter import format_sentence

        return format_sentence(self)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Atomic proposition identified by a single letter.

    Attributes:
        name: The variable letter, case preserved as scanned
    """

    name: str

    def __post_init__(self):
        if len(self.name) != 1 or not self.name.isalpha():
            raise ValueError(f"Variable name must be a single letter: {self.name!r}")
        if self.name in RESERVED_LETTERS:
            raise ValueError(f"'{self.name}' is a reserved operator symbol")

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def variables(self) -> FrozenSet[str]:
        return frozenset((self.name,))

    def is_literal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Negation(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The sentence being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    def variables(self) -> FrozenSet[str]:
        return self.operand.variables()

    def is_literal(self) -> bool:
        return isinstance(self.operand, Variable)


@dataclass(frozen=True, slots=True)
class _Group(Expr):
    """Shared base for the n-ary connectives.

    Attributes:
        operands: Non-empty ordered tuple of child sentences
    """

    operands: Tuple[Expr, ...]

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "operands", tuple(self.operands))
        if not self.operands:
            raise ValueError(f"{type(self).__name__} needs at least one operand")

    def variables(self) -> FrozenSet[str]:
        return frozenset().union(*(op.variables() for op in self.operands))

    def __len__(self) -> int:
        return len(self.operands)

    def __iter__(self):
        return iter(self.operands)


@dataclass(frozen=True, slots=True)
class Disjunction(_Group):
    """Logical OR over an ordered sequence of sentences."""

    def accept(self, v: Visitor):
        return v.visit_disjunction(self)


@dataclass(frozen=True, slots=True)
class Conjunction(_Group):
    """Logical AND over an ordered sequence of sentences."""

    def accept(self, v: Visitor):
        return v.visit_conjunction(self)


Sentence = Union[Variable, Negation, Disjunction, Conjunction]


def is_cnf(sentence: Expr) -> bool:
    """Check whether a sentence has strict conjunctive normal form shape.

    Strict CNF is a Conjunction whose direct children are all Disjunctions
    whose direct children are all literals.

    Args:
        sentence: Sentence to inspect

    Returns:
        True if the tree is a Conjunction of Disjunctions of literals
    """
    if not isinstance(sentence, Conjunction):
        return False
    return all(
        isinstance(clause, Disjunction) and all(lit.is_literal() for lit in clause)
        for clause in sentence
    )
