# lexer.py

"""
Tokenizer for integer arithmetic expressions.

The alphabet is the digits, ``+ - * / % ( )`` and whitespace. A digit run is
read greedily into a single NUMBER token; anything else outside the alphabet
aborts the whole line.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .errors import LexError
from .nodes import INT64_MAX

logger = logging.getLogger(__name__)


class TokenType:
    """Enumeration of token types."""
    NUMBER = 'NUMBER'
    PLUS = 'PLUS'
    MINUS = 'MINUS'
    MUL = 'MUL'
    DIV = 'DIV'
    MOD = 'MOD'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'


@dataclass(frozen=True)
class Token:
    """A token with type, value and character position."""
    type: str
    value: Union[int, str]
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


class Lexer:
    """
    Converts an input string into a list of tokens.
    """
    token_specification = [
        (TokenType.NUMBER, r'[0-9]+'),
        (TokenType.PLUS,   r'\+'),
        (TokenType.MINUS,  r'-'),
        (TokenType.MUL,    r'\*'),
        (TokenType.DIV,    r'/'),
        (TokenType.MOD,    r'%'),
        (TokenType.LPAREN, r'\('),
        (TokenType.RPAREN, r'\)'),
        ('SKIP',           r'[ \t\r\n]+'),
        ('MISMATCH',       r'.'),
    ]
    tok_regex = '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
    get_token = re.compile(tok_regex, re.DOTALL).match

    def __init__(self, text: str):
        self.text = text

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        pos = 0
        mo = self.get_token(self.text)
        while mo is not None:
            kind = mo.lastgroup
            value = mo.group()
            if kind == TokenType.NUMBER:
                tokens.append(Token(kind, self._read_number(value, pos), pos))
            elif kind == 'SKIP':
                pass
            elif kind == 'MISMATCH':
                raise LexError(f"Invalid character {value!r} at position {pos}", pos)
            else:
                tokens.append(Token(kind, value, pos))
            pos = mo.end()
            mo = self.get_token(self.text, pos)
        logger.debug("Lexed %d tokens from %r", len(tokens), self.text)
        return tokens

    @staticmethod
    def _read_number(raw: str, pos: int) -> int:
        # int() refuses very long digit strings, so reject by length first
        digits = raw.lstrip('0') or '0'
        if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
            raise LexError(f"Number too large: {raw} at position {pos}", pos)
        return int(digits)


def tokenize(text: str) -> List[Token]:
    """Tokenize ``text``, raising LexError on the first invalid character."""
    return Lexer(text).tokenize()


def describe(token: Optional[Token]) -> str:
    """Human-readable name of a token for error messages."""
    if token is None:
        return "end of input"
    return f"{token.value!r} at position {token.pos}"
