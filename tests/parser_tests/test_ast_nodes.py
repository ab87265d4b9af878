# tests/parser_tests/test_ast_nodes.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Test suite for sentence AST node behaviour

"""Test suite for the sentence AST nodes.

Covers structural equality, immutability, constructor validation,
visitor dispatch and the small query helpers on every node.
"""

import dataclasses
import pytest
from cnf import parse, parse_cnf, is_cnf
from cnf.ast_nodes import Variable, Negation, Disjunction, Conjunction

A, B, C = Variable("A"), Variable("B"), Variable("C")


class _NodeCounter:
    """Visitor counting nodes per variant."""

    def __init__(self):
        self.counts = {"variable": 0, "negation": 0, "disjunction": 0, "conjunction": 0}

    def visit_variable(self, n):
        self.counts["variable"] += 1

    def visit_negation(self, n):
        self.counts["negation"] += 1
        n.operand.accept(self)

    def visit_disjunction(self, n):
        self.counts["disjunction"] += 1
        for op in n:
            op.accept(self)

    def visit_conjunction(self, n):
        self.counts["conjunction"] += 1
        for op in n:
            op.accept(self)


class TestSentenceNodes:
    """Test cases for AST node semantics."""

    def test_structural_equality(self):
        """Test equality depends on variant, children and order only."""
        assert Disjunction([A, Negation(B)]) == Disjunction((A, Negation(B)))
        assert Disjunction([A, B]) != Disjunction([B, A])
        assert Disjunction([A, B]) != Conjunction([A, B])
        assert Variable("a") != Variable("A")
        assert Negation(A) != A

    def test_nodes_are_hashable(self):
        """Test equal trees hash alike and can be used in sets."""
        trees = {parse("(A v B) ^ C"), parse("(A v B)^C"), parse("A")}
        assert len(trees) == 2

    def test_nodes_are_immutable(self):
        """Test attributes cannot be reassigned after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            A.name = "B"

        clause = Disjunction([A, B])
        with pytest.raises(dataclasses.FrozenInstanceError):
            clause.operands = (C,)

    def test_operands_are_stored_as_tuple(self):
        """Test list input does not leak mutability into the node."""
        operands = [A, B]
        clause = Disjunction(operands)
        operands.append(C)

        assert clause.operands == (A, B)
        assert len(clause) == 2

    @pytest.mark.parametrize("name", ["", "AB", "1", "~", "v"])
    def test_invalid_variable_names(self, name):
        """Test variables must be a single non-reserved letter."""
        with pytest.raises(ValueError):
            Variable(name)

    def test_empty_groups_rejected(self):
        """Test connectives need at least one operand."""
        with pytest.raises(ValueError):
            Disjunction([])
        with pytest.raises(ValueError):
            Conjunction(())

    def test_visitor_dispatch(self):
        """Test accept() reaches the visit method of each variant."""
        counter = _NodeCounter()
        parse("(A v ~B) ^ (~C v A v B) ^ (A ^ B)").accept(counter)

        assert counter.counts == {
            "variable": 7,
            "negation": 2,
            "disjunction": 2,
            "conjunction": 2,
        }

    def test_variables(self):
        """Test collection of variable letters."""
        assert parse("(A v ~B) ^ (~A v c)").variables() == frozenset("ABc")
        assert Negation(A).variables() == frozenset("A")

    def test_is_literal(self):
        """Test only variables and negated variables are literals."""
        assert A.is_literal()
        assert Negation(A).is_literal()
        assert not Negation(Disjunction([A])).is_literal()
        assert not Disjunction([A]).is_literal()

    def test_is_cnf(self):
        """Test strict CNF shape detection."""
        assert is_cnf(parse_cnf("A"))
        assert is_cnf(parse("(A v ~B) ^ (C v A)"))
        assert not is_cnf(parse("A v B"))
        assert not is_cnf(parse("(A v B) ^ C"))
        assert not is_cnf(Conjunction([Disjunction([Conjunction([A])])]))
