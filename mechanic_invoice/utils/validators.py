from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")

_MONEY_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_money(text: str, symbol: str = "$") -> Decimal:
    """
    '$250', '250.5', ' $ 12.345 ' -> Decimal rounded half-up to cents.
    Raises ValueError for anything that is not a plain decimal number.
    """
    t = (text or "").strip()
    if symbol and t.startswith(symbol):
        t = t[len(symbol):].strip()
    if not _MONEY_RE.fullmatch(t):
        raise ValueError(f"not a money amount: {text!r}")
    try:
        v = Decimal(t).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"amount too large: {text!r}") from None
    return abs(v) if v == 0 else v  # no "-0.00"


def parse_choice(text: str) -> int:
    t = (text or "").strip()
    if not re.fullmatch(r"[+-]?[0-9]+", t):
        raise ValueError(f"not a whole number: {text!r}")
    return int(t)
