"""
Integer expression calculator: lexer, recursive descent parser, checked
evaluator and two renderers (canonical infix and tree diagram).
"""

from .errors import (
    CalculatorError, ConfigError, DivisionByZeroError, EvalError, LexError,
    NestingError, OverflowEvalError, ParseError,
)
from .evaluator import Evaluator, evaluate
from .lexer import Token, TokenType, tokenize
from .nodes import (
    Addition, BinaryOperation, Division, Expression, Multiplication,
    Negation, Number, Remainder, Subtraction,
)
from .parser import Parser, parse
from .renderer import render_infix, render_tree

__version__ = "0.1.0"

__all__ = [
    "CalculatorError", "ConfigError", "DivisionByZeroError", "EvalError",
    "LexError", "NestingError", "OverflowEvalError", "ParseError",
    "Evaluator", "evaluate",
    "Token", "TokenType", "tokenize",
    "Addition", "BinaryOperation", "Division", "Expression", "Multiplication",
    "Negation", "Number", "Remainder", "Subtraction",
    "Parser", "parse",
    "render_infix", "render_tree",
]
