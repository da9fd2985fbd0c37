from __future__ import annotations

from datetime import datetime
from typing import List

from mechanic_invoice.cli.states import InvoiceSession
from mechanic_invoice.constants import (
    BLANK_FIELD,
    INVOICE_END,
    INVOICE_RULE,
    INVOICE_TITLE,
    LABEL_WIDTH,
    TIME_FORMAT,
)
from mechanic_invoice.utils.formatters import money


def _or_blank(v: str) -> str:
    return v if v.strip() else BLANK_FIELD


def render_invoice(session: InvoiceSession, now: datetime | None = None) -> str:
    """
    Plain-text invoice block meant to be pasted into a document.
    Caller guarantees the session has at least one item.
    """
    ts = (now or datetime.now()).strftime(TIME_FORMAT)

    lines: List[str] = [
        "",
        "",
        INVOICE_TITLE,
        f"Date/Time: {ts}",
        f"Customer:  {_or_blank(session.customer_name)}",
        f"Vehicle:   {_or_blank(session.vehicle_label)}",
        INVOICE_RULE,
    ]

    for i, li in enumerate(session.items, start=1):
        notes = f" ({li.notes})" if li.notes.strip() else ""
        lines.append(f"{i}) {li.job_type.label:<{LABEL_WIDTH}}{notes}  {money(li.amount)}")

    lines += [
        INVOICE_RULE,
        f"TOTAL: {money(session.subtotal)}",
        INVOICE_END,
    ]
    return "\n".join(lines)
