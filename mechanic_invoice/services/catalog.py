from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple

from mechanic_invoice.constants import DEFAULT_JOB_TYPES

ZERO = Decimal("0")


@dataclass(frozen=True)
class JobType:
    id: str
    label: str
    min_price: Decimal = ZERO
    max_price: Decimal = ZERO

    @property
    def has_range(self) -> bool:
        return not (self.min_price == 0 and self.max_price == 0)

    def in_range(self, amount: Decimal) -> bool:
        return self.min_price <= amount <= self.max_price


Catalog = Tuple[JobType, ...]


def build_catalog(ranges: Optional[Dict[str, Tuple[Decimal, Decimal]]] = None) -> Catalog:
    """
    Default job types in menu order, with configured (min, max) overrides
    applied by id. Built once per run; never mutated afterwards.
    """
    ranges = ranges or {}
    out = []
    for job_id, label, lo, hi in DEFAULT_JOB_TYPES:
        lo_d, hi_d = ranges.get(job_id, (Decimal(lo), Decimal(hi)))
        out.append(JobType(job_id, label, lo_d, hi_d))
    return tuple(out)


def job_for_choice(catalog: Catalog, choice: int) -> Optional[JobType]:
    """1-based menu number -> job type, None when outside the catalog."""
    if 1 <= choice <= len(catalog):
        return catalog[choice - 1]
    return None
