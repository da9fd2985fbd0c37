from decimal import ROUND_HALF_UP, Decimal, localcontext

from mechanic_invoice.config import settings
from mechanic_invoice.services.catalog import JobType

CENTS = Decimal("0.01")


def money(v: Decimal, symbol: str | None = None) -> str:
    sym = settings.currency_symbol if symbol is None else symbol
    with localcontext() as ctx:
        # enough digits for every integer place plus cents
        ctx.prec = max(ctx.prec, v.adjusted() + 3)
        return f"{sym}{v.quantize(CENTS, rounding=ROUND_HALF_UP)}"


def whole_money(v: Decimal, symbol: str | None = None) -> str:
    """Range bounds: '$300' for whole amounts, '$12.50' otherwise."""
    sym = settings.currency_symbol if symbol is None else symbol
    if v == v.to_integral_value():
        return f"{sym}{int(v)}"
    return money(v, sym)


def range_text(job: JobType, symbol: str | None = None) -> str:
    if not job.has_range:
        return "set range later"
    return f"{whole_money(job.min_price, symbol)} - {whole_money(job.max_price, symbol)}"
