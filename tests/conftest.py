import io
from datetime import datetime

import pytest

from mechanic_invoice.cli import handlers
from mechanic_invoice.cli.console import Console
from mechanic_invoice.config import Settings
from mechanic_invoice.services.catalog import build_catalog
from mechanic_invoice.utils import formatters

FIXED_NOW = datetime(2025, 3, 14, 9, 5)


@pytest.fixture(autouse=True)
def dollar_settings(monkeypatch):
    s = Settings(currency_symbol="$", log_level=30)
    monkeypatch.setattr(formatters, "settings", s)
    monkeypatch.setattr(handlers, "settings", s)
    return s


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def scripted():
    """scripted("line1", "line2") -> (Console, stdout buffer)"""
    def make(*lines):
        out = io.StringIO()
        return Console(io.StringIO("".join(f"{l}\n" for l in lines)), out), out
    return make


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
