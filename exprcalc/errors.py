# errors.py

"""
Exception hierarchy for the calculator.

Every stage raises a subclass of CalculatorError so the command loop can report
the failure and carry on with the next line.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class LexError(CalculatorError):
    """Raised when the input contains a character or literal the lexer rejects."""

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.pos = pos


class ParseError(CalculatorError):
    """Raised when the token sequence does not form an expression."""

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.pos = pos


class NestingError(ParseError):
    """Raised when an expression nests deeper than the configured limit."""
    pass


class EvalError(CalculatorError):
    """Raised when evaluation fails."""
    pass


class OverflowEvalError(EvalError):
    """Raised when a result falls outside the 64-bit signed range."""
    pass


class DivisionByZeroError(EvalError):
    """Raised for division or remainder by zero."""
    pass


class ConfigError(CalculatorError):
    """Raised when settings fail validation."""
    pass
