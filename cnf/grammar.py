# cnf/grammar.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Depth-aware scanner and recursive-descent parser for propositional sentences

"""Recursive-descent grammar for propositional sentences.

The grammar is deliberately small: a sentence is a ``^``-separated list of
conjuncts, a conjunct is a ``v``-separated list of disjuncts, and a
disjunct is a literal (a letter, optionally prefixed by ``~``) or a
parenthesized sentence. Parentheses may wrap anything.

All splitting happens over the token list produced by CNFLexer and only
at parenthesis depth zero, so ``(A ^ B) v C`` splits on the ``v`` and not
on the ``^`` inside the group.

Operator Precedence (lowest to highest):
- AND ('^')
- OR ('v')
- NOT ('~') and literals
"""

from typing import List, Sequence

from .lexer import CNFLexer
from .ast_nodes import Expr, Variable, Negation, Disjunction, Conjunction
from .exceptions import MissingVariable, ParenthesisMismatch, UnexpectedLiteral
from utils.logger import get_logger


def check_balance(tokens: Sequence, text: str) -> None:
    """Verify that parentheses in a token stream are balanced.

    Args:
        tokens: Tokens produced by CNFLexer
        text: Source text, used for error context

    Raises:
        ParenthesisMismatch: On an unmatched ')' or an unclosed '('
    """
    open_positions: List[int] = []
    for tok in tokens:
        if tok.type == "LPAREN":
            open_positions.append(tok.index)
        elif tok.type == "RPAREN":
            if not open_positions:
                raise ParenthesisMismatch(
                    f"Parenthesis mismatch: unmatched ')' at position {tok.index}",
                    text,
                )
            open_positions.pop()

    if open_positions:
        raise ParenthesisMismatch(
            f"Parenthesis mismatch: unclosed '(' at position {open_positions[-1]}",
            text,
        )


def strip_parens(tokens: Sequence) -> Sequence:
    """Remove parenthesis pairs that enclose the entire token range.

    A pair is stripped only when the depth first returns to zero at the
    final token; ``(A) v (B)`` is left untouched.

    Args:
        tokens: Token range to strip

    Returns:
        The innermost range not fully enclosed by a parenthesis pair

    Raises:
        ParenthesisMismatch: If the range is internally unbalanced
    """
    while len(tokens) >= 2 and tokens[0].type == "LPAREN" and tokens[-1].type == "RPAREN":
        depth = 0
        for tok in tokens[:-1]:
            if tok.type == "LPAREN":
                depth += 1
            elif tok.type == "RPAREN":
                depth -= 1
            if depth == 0:
                # Outer '(' closed before the end: not an enclosing pair
                return tokens
        if depth != 1:
            raise ParenthesisMismatch("Parenthesis mismatch inside group")
        tokens = tokens[1:-1]
    return tokens


def split_top_level(tokens: Sequence, op_type: str) -> List[Sequence]:
    """Split a token range on an operator occurring at depth zero.

    Args:
        tokens: Token range to split
        op_type: Token type of the separator, "AND" or "OR"

    Returns:
        The operand ranges in source order; a single element when the
        operator does not occur at the top level. Ranges may be empty.
    """
    parts: List[Sequence] = []
    depth = 0
    start = 0
    for i, tok in enumerate(tokens):
        if tok.type == "LPAREN":
            depth += 1
        elif tok.type == "RPAREN":
            depth -= 1
        elif tok.type == op_type and depth == 0:
            parts.append(tokens[start:i])
            start = i + 1
    parts.append(tokens[start:])
    return parts


class _SentenceParser:
    """Recursive-descent parser over a single source string.

    A fresh instance is used per parse; it holds the source text only to
    quote offending fragments in error messages.
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = list(CNFLexer().tokenize(text))
        check_balance(self.tokens, text)

    def _fragment(self, tokens: Sequence) -> str:
        if not tokens:
            return ""
        first, last = tokens[0], tokens[-1]
        return self.text[first.index : last.index + len(last.value)]

    # Generic reading: nested groups allowed, singleton groups collapsed

    def parse(self) -> Expr:
        """Parse the whole source into the most direct sentence tree.

        Returns:
            Root sentence node

        Raises:
            ParseError: Any subclass, on malformed input
        """
        return self._sentence(self.tokens, self.tokens)

    def _sentence(self, tokens: Sequence, context: Sequence) -> Expr:
        tokens = strip_parens(tokens)
        conjuncts = split_top_level(tokens, "AND")
        if len(conjuncts) == 1:
            return self._disjunction(tokens, context)
        return Conjunction(self._disjunction(c, tokens) for c in conjuncts)

    def _disjunction(self, tokens: Sequence, context: Sequence) -> Expr:
        tokens = strip_parens(tokens)
        disjuncts = split_top_level(tokens, "OR")
        if len(disjuncts) == 1:
            return self._operand(tokens, context)
        return Disjunction(self._operand(d, tokens) for d in disjuncts)

    def _operand(self, tokens: Sequence, context: Sequence) -> Expr:
        stripped = strip_parens(tokens)
        if self._has_top_level_operator(stripped):
            return self._sentence(stripped, tokens)
        return self._literal(stripped, context)

    @staticmethod
    def _has_top_level_operator(tokens: Sequence) -> bool:
        return (
            len(split_top_level(tokens, "AND")) > 1
            or len(split_top_level(tokens, "OR")) > 1
        )

    # Strict CNF reading: Conjunction of Disjunctions of literals, no collapsing

    def parse_cnf(self) -> Conjunction:
        """Parse the whole source as a strict CNF formula.

        Returns:
            Conjunction whose operands are all Disjunctions of literals

        Raises:
            ParseError: Any subclass; a nested group in a literal position
                raises UnexpectedLiteral
        """
        tokens = strip_parens(self.tokens)
        clauses = []
        for conjunct in split_top_level(tokens, "AND"):
            conjunct = strip_parens(conjunct)
            clauses.append(
                Disjunction(
                    self._literal(strip_parens(d), conjunct)
                    for d in split_top_level(conjunct, "OR")
                )
            )
        return Conjunction(clauses)

    def _literal(self, tokens: Sequence, context: Sequence) -> Expr:
        """Resolve a token range to a Variable or Negation of a Variable.

        Args:
            tokens: Paren-stripped token range at a literal position
            context: Enclosing range, quoted when the literal is empty

        Raises:
            MissingVariable: The range (or the range after '~') is empty
            UnexpectedLiteral: The range is not exactly one variable
        """
        if not tokens:
            raise MissingVariable(
                f"Parse Error: missing variable in '{self._fragment(context)}'",
                self._fragment(context),
            )

        negated = tokens[0].type == "NOT"
        body = strip_parens(tokens[1:]) if negated else tokens

        if negated and not body:
            raise MissingVariable(
                f"Parse Error: missing variable after '~' in '{self._fragment(tokens)}'",
                self._fragment(tokens),
            )

        if len(body) != 1 or body[0].type != "VAR":
            fragment = self._fragment(body)
            raise UnexpectedLiteral(
                f"Parse Error: unexpected literal '{fragment}'", fragment
            )

        var = Variable(body[0].value)
        get_logger().debug(f"Literal {'~' if negated else ''}{var.name} resolved")
        return Negation(var) if negated else var
