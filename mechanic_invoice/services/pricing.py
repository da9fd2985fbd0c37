from __future__ import annotations

from decimal import Decimal
from enum import Enum

from mechanic_invoice.services.catalog import JobType


class PriceCheck(str, Enum):
    OK = "ok"
    NEGATIVE = "negative"
    OUT_OF_RANGE = "out_of_range"


def check_price(job: JobType, amount: Decimal) -> PriceCheck:
    # negatives are never billable, override or not
    if amount < 0:
        return PriceCheck.NEGATIVE
    if not job.has_range or job.in_range(amount):
        return PriceCheck.OK
    return PriceCheck.OUT_OF_RANGE
