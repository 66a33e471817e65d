"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from fintrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("R$ 50", Decimal("50.00")),
        ("€ 9.999", Decimal("10.00")),
        ("0.005", Decimal("0.01")),
        (" 42 ", Decimal("42.00")),
    ],
)
def test_parse_amount(text, expected):
    amount = parse_amount(text)

    assert amount == expected
    assert amount.as_tuple().exponent == -2


def test_negative_amount_is_kept():
    assert parse_amount("-10") == Decimal("-10.00")


@pytest.mark.parametrize("text", ["", "   ", "abc", "$", "NaN", "Infinity"])
def test_invalid_amount(text):
    with pytest.raises(ValueError):
        parse_amount(text)
