"""Tests for display formatting."""

import pytest

from core import evaluate
from utils.formatting import format_number, format_display, format_result


@pytest.mark.parametrize("value, text", [
    (14.0, "14"),
    (0.5, "0.5"),
    (-3.0, "-3"),
    (0.0, "0"),
    (-0.0, "0"),
    (1e-05, "0.00001"),
    (1e17, "100000000000000000"),
    (0.1 + 0.2, "0.30000000000000004"),
])
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize("value", [1 / 3 / 1e12, 1.234567e-07, 2 / 3 * 1e20, -1 / 7])
def test_format_number_is_exact_and_positional(value):
    text = format_number(value)
    assert "e" not in text
    assert float(text) == value


def test_format_number_fraction_digits():
    assert format_number(2 / 3, max_fraction_digits=3) == "0.667"


def test_format_display_caps_fraction_digits():
    assert format_display(0.1 + 0.2) == "0.3"
    assert format_display(1 / 3) == "0.333333333333"


def test_format_non_finite():
    assert format_number(float("inf")) == "Error"


def test_format_result():
    assert format_result(evaluate("1/4")) == "0.25"
    assert format_result(evaluate("1/0")) == "Error"
