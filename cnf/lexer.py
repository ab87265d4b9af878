# cnf/lexer.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Lexical analyzer for propositional sentence tokenization using SLY

"""Lexical analyzer for propositional sentence strings.

Breaks sentence text into single-character tokens for the depth-aware
scanner and parser. Characters outside the alphabet are not fatal here:
they come out as ERROR tokens so the parser can report the whole literal
they spoil instead of a bare position.

Supported Tokens:
- Operators: ~ (NOT), v (OR), ^ (AND)
- Grouping: ( and )
- Variables: any single ASCII letter except the reserved 'v'
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger

# Operator symbols shared with the formatter and the generator
NEG_SYMBOL = "~"
OR_SYMBOL = "v"
AND_SYMBOL = "^"


class CNFLexer(Lexer):
    """SLY-based lexer for propositional sentences.

    Every token spans exactly one character of the source, so a token's
    ``index`` plus the length of its ``value`` always gives its end.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "NOT",
        "OR",
        "AND",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"~"
    OR = r"v"
    AND = r"\^"
    LPAREN = r"\("
    RPAREN = r"\)"

    # 'v' is matched by OR above and excluded here as well
    VAR = r"[A-Za-uw-z]"

    def error(self, t):
        """Turn an illegal character into a one-character ERROR token.

        Args:
            t: SLY token holding the remaining input

        Returns:
            The token, typed ERROR, covering only the illegal character
        """
        logger = get_logger()
        logger.debug(f"Illegal character '{t.value[0]}' at position {self.index}")

        t.value = t.value[0]
        self.index += 1
        return t
