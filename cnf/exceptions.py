# cnf/exceptions.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Custom exceptions for sentence parsing

"""Domain-specific exceptions for propositional sentence processing.

All parse failures derive from ParseError so callers can catch the whole
family at once, while the concrete subclasses tell a missing operand, a
malformed literal and unbalanced grouping apart. Each carries the
offending fragment of the input where one is available.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when sentence parsing fails due to syntax errors.

    Attributes:
        fragment: Offending substring of the input, or None when the
            failure has no meaningful text to point at
    """

    def __init__(self, message: str, fragment: Optional[str] = None):
        super().__init__(message)
        self.fragment = fragment


class MissingVariable(ParseError):
    """A literal position resolved to an empty token sequence."""

    pass


class UnexpectedLiteral(ParseError):
    """A literal position resolved to something other than one letter."""

    pass


class ParenthesisMismatch(ParseError):
    """Unbalanced or inconsistently nested parentheses."""

    pass


class NumericParseError(ValueError):
    """Raised when a clause/variable ratio argument is not a number."""

    pass
