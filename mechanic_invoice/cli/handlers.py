from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Tuple

from mechanic_invoice.cli.console import Console
from mechanic_invoice.cli.menu import menu_lines
from mechanic_invoice.cli.states import InvoiceSession, LineItem, Step
from mechanic_invoice.config import settings
from mechanic_invoice.constants import FINISH_CHOICE, OVERRIDE_YES
from mechanic_invoice.services.catalog import Catalog, JobType, job_for_choice
from mechanic_invoice.services.invoice_text import render_invoice
from mechanic_invoice.services.pricing import PriceCheck, check_price
from mechanic_invoice.utils.formatters import money, range_text
from mechanic_invoice.utils.validators import parse_choice, parse_money

logger = logging.getLogger(__name__)


def _goto(session: InvoiceSession, step: Step) -> None:
    logger.debug("step %s -> %s", session.step.value, step.value)
    session.step = step


def read_int(console: Console, prompt: str) -> int:
    raw = console.ask(prompt)
    while True:
        try:
            return parse_choice(raw)
        except ValueError:
            logger.debug("not a whole number: %r", raw)
            raw = console.ask("Enter a valid whole number: ")


def read_money(console: Console, prompt: str) -> Decimal:
    sym = settings.currency_symbol
    raw = console.ask(prompt)
    while True:
        try:
            return parse_money(raw, sym)
        except ValueError:
            logger.debug("not a money amount: %r", raw)
            raw = console.ask(f"Enter a valid number (e.g., 250 or 250.00): {sym}")


def collect_header(console: Console, session: InvoiceSession) -> None:
    session.customer_name = console.ask("Customer name (or IGN): ").strip()
    session.vehicle_label = console.ask("Vehicle (optional): ").strip()
    logger.info("session started for %r", session.customer_name or "-")


def choose_job_type(console: Console, session: InvoiceSession, catalog: Catalog) -> Optional[JobType]:
    """Menu loop. None means the operator chose to finish."""
    while True:
        _goto(session, Step.SELECTING_TYPE)
        console.say()
        console.say("Add a line item:")
        for line in menu_lines(catalog):
            console.say(line)

        choice = read_int(console, f"Choose (number), or {FINISH_CHOICE} to finish: ")
        if choice == FINISH_CHOICE:
            return None

        job = job_for_choice(catalog, choice)
        if job is None:
            console.say("Invalid choice.")
            continue
        return job


def read_price_with_range_check(console: Console, session: InvoiceSession, job: JobType) -> Tuple[Decimal, bool]:
    """
    Loops until a price is accepted. Returns (amount, overridden).
    A rejected override throws the amount away and asks for a new one.
    """
    sym = settings.currency_symbol
    while True:
        _goto(session, Step.ENTERING_PRICE)
        amount = read_money(console, f"Enter price for {job.label} (numbers only): {sym}")

        result = check_price(job, amount)
        if result is PriceCheck.OK:
            return amount, False

        if result is PriceCheck.NEGATIVE:
            console.say("Price can't be negative.")
            continue

        _goto(session, Step.CONFIRMING_RANGE)
        console.say(f"⚠ Out of allowed range for {job.label} ({range_text(job)}).")
        yn = console.ask(f"Type '{OVERRIDE_YES}' to accept anyway, or 'n' to re-enter: ")
        if yn.strip().lower() == OVERRIDE_YES:
            logger.info("override: %s at %s outside %s", job.label, amount, range_text(job))
            return amount, True
        logger.debug("override declined for %s at %s", job.label, amount)


def add_item(console: Console, session: InvoiceSession, item: LineItem) -> None:
    session.items.append(item)
    logger.info("item #%d added: %s %s", len(session.items), item.job_type.id, item.amount)
    console.say(f"Added: {item.job_type.label} - {money(item.amount)}")


def finish(console: Console, session: InvoiceSession, now: Optional[datetime] = None) -> None:
    if not session.items:
        _goto(session, Step.DONE)
        console.say()
        console.say("No items added. Exiting.")
        return

    _goto(session, Step.RENDERING)
    console.say(render_invoice(session, now))
    logger.info("invoice rendered: %d items, total %s", len(session.items), session.subtotal)
    _goto(session, Step.DONE)


def run_session(
    console: Console,
    catalog: Catalog,
    clock: Callable[[], datetime] = datetime.now,
) -> InvoiceSession:
    session = InvoiceSession()

    console.say("=== HighLife Mechanic Invoice Helper ===")
    collect_header(console, session)

    _goto(session, Step.ADDING_ITEMS)
    while True:
        job = choose_job_type(console, session, catalog)
        if job is None:
            break

        _goto(session, Step.ENTERING_NOTES)
        notes = console.ask("Notes (optional, e.g., 'Highway callout', '2 jerry cans'): ").strip()

        amount, overridden = read_price_with_range_check(console, session, job)
        add_item(console, session, LineItem(job, notes, amount, overridden))

    finish(console, session, clock())
    return session
