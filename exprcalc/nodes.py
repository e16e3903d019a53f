# nodes.py

"""
AST node types.

Expression is a closed set of frozen dataclasses. Every node records the height
of the subtree below it in ``depth`` so the parser can bound recursion without
walking the tree again.
"""

from dataclasses import dataclass, field

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Expression:
    """Base AST node."""
    depth: int = field(init=False, repr=False, compare=False)


@dataclass(frozen=True)
class Number(Expression):
    value: int

    def __post_init__(self):
        object.__setattr__(self, 'depth', 1)


@dataclass(frozen=True)
class Negation(Expression):
    operand: Expression

    def __post_init__(self):
        object.__setattr__(self, 'depth', self.operand.depth + 1)


@dataclass(frozen=True)
class BinaryOperation(Expression):
    """Base for the two-operand nodes."""
    left: Expression
    right: Expression

    def __post_init__(self):
        object.__setattr__(self, 'depth', max(self.left.depth, self.right.depth) + 1)


@dataclass(frozen=True)
class Addition(BinaryOperation):
    pass


@dataclass(frozen=True)
class Subtraction(BinaryOperation):
    pass


@dataclass(frozen=True)
class Multiplication(BinaryOperation):
    pass


@dataclass(frozen=True)
class Division(BinaryOperation):
    pass


@dataclass(frozen=True)
class Remainder(BinaryOperation):
    pass
