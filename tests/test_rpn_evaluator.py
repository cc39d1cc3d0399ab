"""Tests for postfix evaluation and the operator table."""

import pytest

from core import RPNEvaluator, Operators, Token, TOKEN_DEFINITIONS, ErrorKind


def n(text):
    return Token.number(text)


def op(symbol):
    return TOKEN_DEFINITIONS[symbol]


# --- Arithmetic ---

def test_single_number():
    assert RPNEvaluator.evaluate([n("42")]).value == pytest.approx(42.0)


@pytest.mark.parametrize("symbol, expected", [
    ("+", 8.0), ("-", 4.0), ("*", 12.0), ("/", 3.0),
])
def test_binary_operators(symbol, expected):
    result = RPNEvaluator.evaluate([n("6"), n("2"), op(symbol)])
    assert result.value == pytest.approx(expected)


def test_operand_order():
    # b is the more recently pushed value: 2 10 - == 2 - 10
    assert RPNEvaluator.evaluate([n("2"), n("10"), op("-")]).value == pytest.approx(-8.0)


def test_percent():
    assert RPNEvaluator.evaluate([n("50"), op("%")]).value == pytest.approx(0.5)


def test_result_is_plain_float():
    value = RPNEvaluator.evaluate([n("1"), n("2"), op("+")]).value
    assert type(value) is float


# --- Errors ---

def test_division_by_zero():
    result = RPNEvaluator.evaluate([n("5"), n("0"), op("/")])
    assert result.kind is ErrorKind.DIVISION_BY_ZERO


def test_division_by_zero_subexpression():
    result = RPNEvaluator.evaluate([n("1"), n("2"), n("2"), op("-"), op("/")])
    assert result.kind is ErrorKind.DIVISION_BY_ZERO


def test_missing_operand():
    assert RPNEvaluator.evaluate([n("1"), op("+")]).kind is ErrorKind.INVALID_EXPRESSION


def test_dangling_percent():
    assert RPNEvaluator.evaluate([op("%")]).kind is ErrorKind.INVALID_EXPRESSION


def test_too_many_operands():
    assert RPNEvaluator.evaluate([n("1"), n("2")]).kind is ErrorKind.INVALID_EXPRESSION


def test_empty_sequence():
    assert RPNEvaluator.evaluate([]).kind is ErrorKind.INVALID_EXPRESSION


def test_overflow_is_invalid_result():
    big = "1" + "0" * 300
    result = RPNEvaluator.evaluate([n(big), n(big), op("*")])
    assert result.kind is ErrorKind.INVALID_RESULT


# --- Operators ---

def test_operators_lookup_by_token_name():
    for symbol in "+-*/":
        assert callable(getattr(Operators, TOKEN_DEFINITIONS[symbol].name))


def test_operators_overflow_does_not_raise():
    assert not Operators.is_finite(Operators.mul(1e308, 10.0))


def test_operand_count_follows_token_arity():
    assert TOKEN_DEFINITIONS["%"].arity == 1
    assert all(TOKEN_DEFINITIONS[s].arity == 2 for s in "+-*/")
    assert RPNEvaluator.evaluate([n("1"), op("%")]).is_ok
    assert RPNEvaluator.evaluate([n("1"), op("*")]).kind is ErrorKind.INVALID_EXPRESSION
