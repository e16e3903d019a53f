# parser.py

"""
Recursive descent parser for integer arithmetic expressions.

Grammar (lowest to highest precedence):
    expression : term ((PLUS|MINUS) term)*
    term       : factor ((MUL|DIV|MOD) factor)*
    factor     : NUMBER | MINUS factor | LPAREN expression RPAREN

Binary operators are left-associative: each loop folds the accumulated node
into the left child of the next one. Unary minus recurses into factor, so it
binds tighter than every binary operator (``-2*3`` is ``(-2)*3``).
"""

import logging
from typing import Dict, List, Optional, Type

from .errors import NestingError, ParseError
from .lexer import Token, TokenType, describe, tokenize
from .nodes import (
    Addition, BinaryOperation, Division, Expression, Multiplication,
    Negation, Number, Remainder, Subtraction,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100
# Each parenthesis level costs three frames (factor, expression, term); at
# 200 levels the parser and the tree walks stay inside the default recursion limit.
MAX_DEPTH_LIMIT = 200

ADDITIVE_OPS: Dict[str, Type[BinaryOperation]] = {
    TokenType.PLUS: Addition,
    TokenType.MINUS: Subtraction,
}

MULTIPLICATIVE_OPS: Dict[str, Type[BinaryOperation]] = {
    TokenType.MUL: Multiplication,
    TokenType.DIV: Division,
    TokenType.MOD: Remainder,
}


class Parser:
    """
    Builds an Expression from a token list.

    ``max_depth`` bounds both the recursion through factor (parentheses and
    unary minus) and the height of every node built, so later tree walks
    stay within the interpreter's recursion limit.
    """

    def __init__(self, tokens: List[Token], max_depth: int = DEFAULT_MAX_DEPTH):
        if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self._nesting = 0

    def _current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _check(self, node: Expression) -> Expression:
        if node.depth > self.max_depth:
            raise NestingError(
                f"Expression too deeply nested (limit {self.max_depth})",
                self._position(),
            )
        return node

    def _position(self) -> Optional[int]:
        token = self._current()
        return token.pos if token is not None else None

    def parse(self) -> Expression:
        """
        Parses the whole token list and returns the root node.
        """
        node = self.expression()
        token = self._current()
        if token is not None:
            raise ParseError(f"Unexpected token {describe(token)}", token.pos)
        logger.debug("Parsed %r", node)
        return node

    def expression(self) -> Expression:
        """
        expression : term ((PLUS|MINUS) term)*
        """
        node = self.term()
        while self._current() is not None and self._current().type in ADDITIVE_OPS:
            node_type = ADDITIVE_OPS[self._advance().type]
            node = self._check(node_type(node, self.term()))
        return node

    def term(self) -> Expression:
        """
        term : factor ((MUL|DIV|MOD) factor)*
        """
        node = self.factor()
        while self._current() is not None and self._current().type in MULTIPLICATIVE_OPS:
            node_type = MULTIPLICATIVE_OPS[self._advance().type]
            node = self._check(node_type(node, self.factor()))
        return node

    def factor(self) -> Expression:
        """
        factor : NUMBER | MINUS factor | LPAREN expression RPAREN
        """
        token = self._current()
        if token is None:
            raise ParseError("Invalid expression: unexpected end of input")
        if token.type == TokenType.NUMBER:
            self._advance()
            return Number(token.value)
        if token.type not in (TokenType.MINUS, TokenType.LPAREN):
            raise ParseError(f"Invalid expression: unexpected {describe(token)}", token.pos)

        self._nesting += 1
        try:
            if self._nesting > self.max_depth:
                raise NestingError(
                    f"Expression too deeply nested (limit {self.max_depth})", token.pos
                )
            self._advance()
            if token.type == TokenType.MINUS:
                return self._check(Negation(self.factor()))
            node = self.expression()
            closing = self._current()
            if closing is None or closing.type != TokenType.RPAREN:
                raise ParseError(
                    f"Expected ')' to close '(' at position {token.pos}, got {describe(closing)}",
                    self._position(),
                )
            self._advance()
            return node
        finally:
            self._nesting -= 1


def parse(text: str, max_depth: Optional[int] = None) -> Expression:
    """Lex and parse ``text`` in one step."""
    tokens = tokenize(text)
    if max_depth is None:
        max_depth = DEFAULT_MAX_DEPTH
    return Parser(tokens, max_depth).parse()
