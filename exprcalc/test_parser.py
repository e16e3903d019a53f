# test_parser.py

import pytest

from exprcalc.errors import LexError, NestingError, ParseError
from exprcalc.evaluator import evaluate
from exprcalc.lexer import tokenize
from exprcalc.nodes import (
    Addition, Division, Multiplication, Negation, Number, Remainder, Subtraction,
)
from exprcalc.parser import Parser, parse
from exprcalc.renderer import render_infix, render_tree


def test_parser_number():
    assert parse("42") == Number(42)


def test_parser_simple_addition():
    assert parse("2 + 3") == Addition(Number(2), Number(3))


def test_parser_operator_precedence():
    assert parse("1 + 2 * 3") == Addition(Number(1), Multiplication(Number(2), Number(3)))


def test_parser_parentheses():
    assert parse("(1 + 2) * 3") == Multiplication(Addition(Number(1), Number(2)), Number(3))


@pytest.mark.parametrize("text,node_type", [
    ("8 - 4 - 2", Subtraction),
    ("8 / 4 / 2", Division),
    ("8 % 5 % 2", Remainder),
    ("8 * 4 * 2", Multiplication),
    ("8 + 4 + 2", Addition),
])
def test_parser_left_associative(text, node_type):
    assert parse(text) == node_type(node_type(Number(8), Number(4)), Number(2))


def test_parser_mixed_multiplicative_fold_left():
    assert parse("7 * 6 / 3 % 4") == Remainder(
        Division(Multiplication(Number(7), Number(6)), Number(3)), Number(4)
    )


def test_parser_unary_minus_binds_tighter_than_multiplication():
    assert parse("-2*3") == Multiplication(Negation(Number(2)), Number(3))


def test_parser_unary_minus_on_right_operand():
    assert parse("2 * -3") == Multiplication(Number(2), Negation(Number(3)))


def test_parser_multiple_unary_minus():
    assert parse("--3") == Negation(Negation(Number(3)))
    assert parse("-(-(-2))") == Negation(Negation(Negation(Number(2))))


def test_parser_nested_parentheses():
    assert parse("((2))") == Number(2)


def test_parser_negative_literal_kept_as_negation():
    assert parse("-5 + 3") == Addition(Negation(Number(5)), Number(3))


@pytest.mark.parametrize("text", ["", "   "])
def test_parser_empty_input(text):
    with pytest.raises(ParseError) as e:
        parse(text)
    assert "Invalid expression" in str(e.value)


@pytest.mark.parametrize("text", ["1 +", "1 + + 2", "*2", ")", "()"])
def test_parser_invalid_factor(text):
    with pytest.raises(ParseError) as e:
        parse(text)
    assert "Invalid expression" in str(e.value)


@pytest.mark.parametrize("text", ["(1 + 2", "((1)", "(1 2)"])
def test_parser_missing_parenthesis(text):
    with pytest.raises(ParseError) as e:
        parse(text)
    assert "Expected ')'" in str(e.value)


def test_parser_unmatched_open_parentheses():
    with pytest.raises(ParseError):
        parse("(()")


@pytest.mark.parametrize("text", ["1 + 2 3", "(1))", "4 (5)"])
def test_parser_trailing_tokens(text):
    with pytest.raises(ParseError) as e:
        parse(text)
    assert "Unexpected token" in str(e.value)


def test_parser_reports_lex_errors():
    with pytest.raises(LexError):
        parse("1 + a")


def test_parser_error_position():
    with pytest.raises(ParseError) as e:
        parse("1 + * 2")
    assert e.value.pos == 4


def test_parser_accepts_token_list():
    assert Parser(tokenize("6 % 4")).parse() == Remainder(Number(6), Number(4))


# ---------------------------
# Nesting limits
# ---------------------------

def test_parser_deep_parentheses_rejected():
    text = "(" * 300 + "1" + ")" * 300
    with pytest.raises(NestingError) as e:
        parse(text)
    assert "too deeply nested" in str(e.value)


def test_parser_deep_negation_rejected():
    with pytest.raises(NestingError):
        parse("-" * 300 + "1")


def test_parser_long_operator_chain_rejected():
    with pytest.raises(NestingError):
        parse(" + ".join(["1"] * 300))


def test_parser_nesting_error_is_parse_error():
    with pytest.raises(ParseError):
        parse("((((1))))", max_depth=3)


def test_parser_within_limit():
    assert parse("((((1))))", max_depth=4) == Number(1)
    assert parse(" + ".join(["1"] * 50)).depth == 50


def test_parser_pathological_input_does_not_exhaust_stack():
    with pytest.raises(NestingError):
        parse("(" * 100000 + "1" + ")" * 100000)


def test_parser_rejects_unsafe_max_depth():
    with pytest.raises(ValueError):
        Parser(tokenize("1"), max_depth=201)
    with pytest.raises(ValueError):
        Parser(tokenize("1"), max_depth=0)


def test_parser_largest_limit_reports_nesting_error():
    with pytest.raises(NestingError):
        parse("(" * 3000 + "1" + ")" * 3000, max_depth=200)
    with pytest.raises(NestingError):
        parse("-" * 3000 + "1", max_depth=200)
    with pytest.raises(NestingError):
        parse(" * ".join(["1"] * 3000), max_depth=200)


def test_trees_at_largest_limit_can_be_walked():
    chain = parse(" + ".join(["1"] * 200), max_depth=200)
    assert chain.depth == 200
    assert evaluate(chain) == 200
    assert len(render_tree(chain).splitlines()) == 399

    negations = parse("-" * 199 + "1", max_depth=200)
    assert evaluate(negations) == -1
    assert render_infix(negations) == "-" * 199 + "1"
    assert parse("(" * 199 + "1" + ")" * 199, max_depth=200) == Number(1)
