# tests/test_validators.py
from decimal import Decimal

import pytest

from mechanic_invoice.utils.validators import parse_choice, parse_money


@pytest.mark.parametrize("raw, expected", [
    ("250", "250.00"),
    ("$250", "250.00"),
    ("  $ 12.345 ", "12.35"),
    ("2.675", "2.68"),
    ("1.005", "1.01"),
    ("-1.005", "-1.01"),
    ("$-5", "-5.00"),
    (".5", "0.50"),
    ("7.", "7.00"),
    ("0.004", "0.00"),
    ("-0.004", "0.00"),
])
def test_parse_money_rounds_half_up_to_cents(raw, expected):
    v = parse_money(raw)
    assert str(v) == expected
    assert v.as_tuple().exponent == -2


@pytest.mark.parametrize("raw", [
    "", "   ", "abc", "$", "$$5", "1,000", "1e3", "NaN", "Infinity", "1_000", "12.3.4", "5$",
    "9" * 40, "\u0664\u0665\u0660", "\uff11\uff12",
])
def test_parse_money_rejects_non_decimal_text(raw):
    with pytest.raises(ValueError):
        parse_money(raw)


def test_parse_money_uses_given_symbol():
    assert parse_money("€19.99", symbol="€") == Decimal("19.99")
    with pytest.raises(ValueError):
        parse_money("$19.99", symbol="€")


def test_parse_choice():
    assert parse_choice(" 3 ") == 3
    assert parse_choice("0") == 0
    assert parse_choice("-1") == -1
    for bad in ("", "two", "1.5", "3)", "\u0663"):
        with pytest.raises(ValueError):
            parse_choice(bad)
