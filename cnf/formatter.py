# cnf/formatter.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# AST visitor rendering sentences back to the textual grammar

"""Renders sentence trees back to the textual grammar.

The rendering is the inverse of the parser: every composite operand of a
composite node is wrapped in parentheses, so feeding the output back to
``parse`` (or ``parse_cnf`` for strict CNF trees) reproduces the tree.
Top-level connectives are written without enclosing parentheses.
"""

from __future__ import annotations

from . import ast_nodes as ast
from .lexer import AND_SYMBOL, NEG_SYMBOL, OR_SYMBOL


class SentenceFormatter(ast.Visitor):
    """Formats a sentence tree into text.

    Attributes:
        multiline: Put each operand of a top-level Conjunction on its own line
    """

    def __init__(self, multiline: bool = False):
        self.multiline = multiline

    def format(self, root: ast.Expr) -> str:
        """Render the tree rooted at ``root``."""
        if self.multiline and isinstance(root, ast.Conjunction):
            return f" {AND_SYMBOL}\n".join(self._operand(op) for op in root)
        return root.accept(self)

    def _operand(self, node: ast.Expr) -> str:
        text = node.accept(self)
        if isinstance(node, (ast.Disjunction, ast.Conjunction)):
            return f"({text})"
        return text

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_negation(self, n: ast.Negation) -> str:
        return f"{NEG_SYMBOL}{self._operand(n.operand)}"

    def visit_disjunction(self, n: ast.Disjunction) -> str:
        return f" {OR_SYMBOL} ".join(self._operand(op) for op in n)

    def visit_conjunction(self, n: ast.Conjunction) -> str:
        return f" {AND_SYMBOL} ".join(self._operand(op) for op in n)


def format_sentence(sentence: ast.Expr, multiline: bool = False) -> str:
    """Render a sentence in the textual grammar.

    Args:
        sentence: Root of the tree to render
        multiline: One conjunct per line for a top-level Conjunction

    Returns:
        Text that parses back to a structurally equal tree

    Example:
        >>> format_sentence(Conjunction([Disjunction([Variable("A"), Negation(Variable("B"))]), Variable("C")]))
        '(A v ~B) ^ C'
    """
    return SentenceFormatter(multiline=multiline).format(sentence)
