from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, Tuple

from dotenv import find_dotenv, load_dotenv

from mechanic_invoice.constants import DEFAULT_JOB_TYPES

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../project root
load_dotenv(dotenv_path=ROOT_DIR / ".env")
load_dotenv(find_dotenv(usecwd=True))  # installed copies: .env next to where it is run

RANGE_PREFIX = "JOB_RANGE_"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_log_level(*keys: str, default: str = "WARNING") -> int:
    v = (_get_env(*keys, default=default) or default).upper()
    level = logging.getLevelName(v)
    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL '{v}' is not a logging level")
    return level


def _parse_range(key: str, raw: str) -> Tuple[Decimal, Decimal]:
    lo, sep, hi = raw.partition("-")
    if not sep:
        raise RuntimeError(f"{key} must look like MIN-MAX, got '{raw}'")
    try:
        lo_d = Decimal(lo.strip().lstrip("$"))
        hi_d = Decimal(hi.strip().lstrip("$"))
    except InvalidOperation:
        raise RuntimeError(f"{key} must look like MIN-MAX, got '{raw}'") from None
    if not (lo_d.is_finite() and hi_d.is_finite()) or lo_d < 0 or lo_d > hi_d:
        raise RuntimeError(f"{key} needs 0 <= MIN <= MAX, got '{raw}'")
    return lo_d, hi_d


def _get_ranges() -> Dict[str, Tuple[Decimal, Decimal]]:
    known = {job_id for job_id, *_ in DEFAULT_JOB_TYPES}
    ranges: Dict[str, Tuple[Decimal, Decimal]] = {}
    for key in sorted(os.environ):
        if not key.startswith(RANGE_PREFIX):
            continue
        raw = _get_env(key)
        if raw is None:
            continue
        job_id = key[len(RANGE_PREFIX):].upper()
        if job_id not in known:
            raise RuntimeError(f"{key} names unknown job type. Known: {', '.join(sorted(known))}")
        ranges[job_id] = _parse_range(key, raw)
    return ranges


@dataclass(frozen=True)
class Settings:
    currency_symbol: str
    log_level: int
    job_ranges: Dict[str, Tuple[Decimal, Decimal]] = field(default_factory=dict)


def load_settings() -> Settings:
    return Settings(
        currency_symbol=_get_env("CURRENCY_SYMBOL", default="$") or "$",
        log_level=_get_log_level("LOG_LEVEL", default="WARNING"),
        job_ranges=_get_ranges(),
    )


settings = load_settings()
