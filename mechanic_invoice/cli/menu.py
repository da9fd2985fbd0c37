from typing import List

from mechanic_invoice.services.catalog import Catalog
from mechanic_invoice.utils.formatters import range_text


def menu_lines(catalog: Catalog) -> List[str]:
    width = max(len(job.label) for job in catalog)
    return [
        f"{n}) {job.label:<{width}} ({range_text(job)})"
        for n, job in enumerate(catalog, start=1)
    ]
