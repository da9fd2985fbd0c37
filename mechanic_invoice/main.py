import logging

from mechanic_invoice.cli.console import Console
from mechanic_invoice.cli.handlers import run_session
from mechanic_invoice.config import settings
from mechanic_invoice.services.catalog import build_catalog


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    catalog = build_catalog(settings.job_ranges)
    console = Console()
    try:
        run_session(console, catalog)
    except (EOFError, KeyboardInterrupt):
        console.say()
        console.say("Cancelled.")


if __name__ == "__main__":
    main()
