from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from enum import Enum
from typing import List

from mechanic_invoice.services.catalog import JobType


class Step(str, Enum):
    COLLECTING_HEADER = "collecting_header"
    ADDING_ITEMS = "adding_items"
    SELECTING_TYPE = "selecting_type"
    ENTERING_NOTES = "entering_notes"
    ENTERING_PRICE = "entering_price"
    CONFIRMING_RANGE = "confirming_range"
    RENDERING = "rendering"
    DONE = "done"


@dataclass(frozen=True)
class LineItem:
    job_type: JobType
    notes: str
    amount: Decimal
    overridden: bool = False  # accepted outside the job's range


@dataclass
class InvoiceSession:
    customer_name: str = ""
    vehicle_label: str = ""
    items: List[LineItem] = field(default_factory=list)
    step: Step = Step.COLLECTING_HEADER

    @property
    def subtotal(self) -> Decimal:
        if not self.items:
            return Decimal("0")
        widest = max(li.amount.adjusted() for li in self.items)
        with localcontext() as ctx:
            # exact: room for every item digit plus the carries of the sum
            ctx.prec = max(ctx.prec, widest + 3 + len(str(len(self.items))))
            return sum((li.amount for li in self.items), Decimal("0"))
