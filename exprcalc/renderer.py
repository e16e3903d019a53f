# renderer.py

"""
Presentation of an Expression: a canonical infix string and a tree diagram.

Both are plain functions over the node types so the AST stays free of
formatting code.
"""

from typing import List, Type

from .nodes import (
    Addition, BinaryOperation, Division, Expression, Multiplication,
    Negation, Number, Remainder, Subtraction,
)

SYMBOLS = {
    Addition: '+',
    Subtraction: '-',
    Multiplication: '*',
    Division: '/',
    Remainder: '%',
    Negation: '-',
}

# Higher binds tighter.
PRECEDENCE = {
    Addition: 1,
    Subtraction: 1,
    Multiplication: 3,
    Division: 3,
    Remainder: 3,
    Negation: 5,
}

BRANCH = '├'
LAST_BRANCH = '└'
PIPE_INDENT = '│ '
BLANK_INDENT = '  '


def _lookup(table: dict, node: Expression):
    node_type: Type[Expression] = type(node)
    for cls in node_type.__mro__:
        if cls in table:
            return table[cls]
    raise TypeError(f"Unsupported AST node: {node_type.__name__}")


def render_infix(node: Expression, min_prec: int = 0) -> str:
    """
    Render ``node`` with the fewest parentheses that keep its grouping.

    A node is parenthesized when its precedence is below ``min_prec``. The left
    operand of a binary node is rendered at the node's own precedence and the
    right operand one level higher, which keeps ``a - (b - c)`` intact while
    dropping the redundant parentheses in ``(a - b) - c``.
    """
    if isinstance(node, Number):
        return str(node.value)
    prec = _lookup(PRECEDENCE, node)
    if isinstance(node, Negation):
        text = f"-{render_infix(node.operand, prec)}"
    elif isinstance(node, BinaryOperation):
        left = render_infix(node.left, prec)
        right = render_infix(node.right, prec + 1)
        text = f"{left} {_lookup(SYMBOLS, node)} {right}"
    else:
        raise TypeError(f"Unsupported AST node: {type(node).__name__}")
    if prec < min_prec:
        return f"({text})"
    return text


def _label(node: Expression) -> str:
    if isinstance(node, Number):
        return str(node.value)
    return _lookup(SYMBOLS, node)


def _children(node: Expression) -> List[Expression]:
    if isinstance(node, Number):
        return []
    if isinstance(node, Negation):
        return [node.operand]
    if isinstance(node, BinaryOperation):
        return [node.left, node.right]
    raise TypeError(f"Unsupported AST node: {type(node).__name__}")


def _tree_lines(node: Expression, prefix: str, is_last: bool, lines: List[str]) -> None:
    if lines:
        glyph = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{glyph} {_label(node)}")
    else:
        lines.append(_label(node))
    child_prefix = prefix + (BLANK_INDENT if is_last else PIPE_INDENT)
    children = _children(node)
    for index, child in enumerate(children):
        _tree_lines(child, child_prefix, index == len(children) - 1, lines)


def render_tree(node: Expression) -> str:
    """
    Render ``node`` as an indented diagram, one node per line.

    The root is printed bare. Every other line is the accumulated indent, a
    branch glyph (``└`` for a last child, ``├`` otherwise) and the node label.
    Below a last child the indent grows by blanks, below any other child by a
    vertical bar, so sibling subtrees stay visually separate.
    """
    lines: List[str] = []
    _tree_lines(node, '', True, lines)
    return '\n'.join(lines)
