# tests/parser_tests/test_formatter.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Test suite for rendering sentences back to text

"""Test suite for SentenceFormatter and format_sentence."""

import pytest
from cnf import parse, parse_cnf, format_sentence
from cnf.ast_nodes import Variable, Negation, Disjunction, Conjunction
from utils.logger import get_logger

A, B, C, D = Variable("A"), Variable("B"), Variable("C"), Variable("D")


class TestSentenceFormatter:
    """Test cases for sentence rendering."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    RENDERING_CASES = [
        (A, "A"),
        (Negation(A), "~A"),
        (Disjunction([A, Negation(B), C]), "A v ~B v C"),
        (Conjunction([A, B]), "A ^ B"),
        (
            Conjunction([Disjunction([A, B]), Disjunction([Negation(C), D])]),
            "(A v B) ^ (~C v D)",
        ),
        (Disjunction([Conjunction([A, B]), C]), "(A ^ B) v C"),
        (Disjunction([Disjunction([A, B]), C]), "(A v B) v C"),
        (Negation(Disjunction([A, B])), "~(A v B)"),
        (Conjunction([Disjunction([A])]), "(A)"),
    ]

    @pytest.mark.parametrize("sentence, expected", RENDERING_CASES)
    def test_rendering(self, sentence, expected):
        """Test canonical rendering of each node shape."""
        assert format_sentence(sentence) == expected
        assert str(sentence) == expected

    def test_multiline_places_one_conjunct_per_line(self):
        """Test multiline output of a top-level conjunction."""
        sentence = parse("(A v B) ^ (~C v D) ^ A")

        assert format_sentence(sentence, multiline=True) == "(A v B) ^\n(~C v D) ^\nA"
        assert parse(format_sentence(sentence, multiline=True)) == sentence

    def test_multiline_leaves_other_nodes_unchanged(self):
        """Test multiline only affects a top-level conjunction."""
        sentence = Disjunction([Conjunction([A, B]), C])
        assert format_sentence(sentence, multiline=True) == format_sentence(sentence)

    @pytest.mark.parametrize(
        "formula",
        ["A", "~a", "(A v B) ^ C", "A v (B ^ ~C)", "((A v B) v C) ^ (D ^ A)"],
    )
    def test_parse_round_trip(self, formula):
        """Test parse(format(s)) == s for parser output."""
        sentence = parse(formula)
        assert parse(format_sentence(sentence)) == sentence

    @pytest.mark.parametrize("formula", ["A", "A v ~B", "(A v B) ^ C", "(A) ^ (B) ^ (~C v D)"])
    def test_cnf_round_trip(self, formula):
        """Test parse_cnf(format(s)) == s for strict CNF output."""
        sentence = parse_cnf(formula)
        formatted = format_sentence(sentence)
        self.logger.debug(f"CNF round trip: {formula!r} -> {formatted!r}")

        assert parse_cnf(formatted) == sentence
