"""Tests for infix -> postfix conversion."""

import pytest

from core import tokenize, to_rpn, ErrorKind, TokenType


def _rpn(text):
    result = to_rpn(tokenize(text).value)
    assert result.is_ok, result
    return " ".join(t.text for t in result.value)


# --- Precedence and associativity ---

@pytest.mark.parametrize("infix, postfix", [
    ("2+3*4", "2 3 4 * +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("10-2-3", "10 2 - 3 -"),
    ("8/4/2", "8 4 / 2 /"),
    ("1*2+3", "1 2 * 3 +"),
    ("1-2*3/4+5", "1 2 3 * 4 / - 5 +"),
])
def test_conversion(infix, postfix):
    assert _rpn(infix) == postfix


def test_nested_parentheses():
    assert _rpn("((1+2)*(3-4))") == "1 2 + 3 4 - *"


def test_percent_goes_straight_to_output():
    assert _rpn("50%+10") == "50 % 10 +"


def test_no_parentheses_in_output():
    tokens = to_rpn(tokenize("(1+(2*3))").value).value
    assert all(t.type not in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN) for t in tokens)


def test_missing_operands_are_not_checked_here():
    # 2 + + 3 is rejected later by the evaluator
    assert to_rpn(tokenize("2++3").value).is_ok


# --- Mismatched parentheses ---

@pytest.mark.parametrize("text", ["(2+3", "2+3)", ")(", "((1)", "1)+(2"])
def test_mismatched_parentheses(text):
    assert to_rpn(tokenize(text).value).kind is ErrorKind.MISMATCHED_PARENTHESES
