# evaluator.py

"""
Checked evaluation of an Expression into a 64-bit signed integer.

Operands are evaluated left to right and the first failure propagates, so the
right operand of a failing left operand is never visited. Division truncates
toward zero and the remainder keeps the sign of the dividend.
"""

import logging

from .errors import DivisionByZeroError, EvalError, OverflowEvalError
from .nodes import (
    INT64_MAX, INT64_MIN, Addition, BinaryOperation, Division, Expression,
    Multiplication, Negation, Number, Remainder, Subtraction,
)

logger = logging.getLogger(__name__)


def _checked(value: int, description: str) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowEvalError(f"Integer overflow in {description}")
    return value


def _truncated_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Evaluator:
    """
    Evaluates an AST and computes the result.
    """

    def eval(self, node: Expression) -> int:
        """
        Recursively evaluates the node, raising an EvalError subclass on
        overflow or division by zero.
        """
        if isinstance(node, Number):
            return _checked(node.value, "literal")
        if isinstance(node, Negation):
            return _checked(-self.eval(node.operand), "negation")
        if isinstance(node, BinaryOperation):
            left = self.eval(node.left)
            right = self.eval(node.right)
            return self._apply(node, left, right)
        raise EvalError(f"Unsupported AST node: {type(node).__name__}")

    def _apply(self, node: BinaryOperation, left: int, right: int) -> int:
        if isinstance(node, Addition):
            return _checked(left + right, "addition")
        if isinstance(node, Subtraction):
            return _checked(left - right, "subtraction")
        if isinstance(node, Multiplication):
            return _checked(left * right, "multiplication")
        if isinstance(node, (Division, Remainder)):
            if right == 0:
                kind = "Division" if isinstance(node, Division) else "Remainder"
                raise DivisionByZeroError(f"{kind} by zero")
            # MIN / -1 has no representable quotient; the remainder fails with it
            quotient = _checked(_truncated_div(left, right), "division")
            if isinstance(node, Division):
                return quotient
            return left - right * quotient
        raise EvalError(f"Unknown binary operator: {type(node).__name__}")


def evaluate(node: Expression) -> int:
    """Evaluate ``node`` with a fresh Evaluator."""
    try:
        return Evaluator().eval(node)
    except EvalError as e:
        logger.debug("Evaluation failed: %s", e)
        raise
