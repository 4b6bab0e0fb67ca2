import logging
from decimal import Decimal

import pytest

from fxform.core.config import Settings
from fxform.services.amount_parser import AmountParser
from fxform.services.rates.table import RateTable
from fxform.viewmodels.main import MainViewModel


@pytest.fixture
def settings():
    """Default settings, isolated from any .env file or FXFORM_* variables."""
    s = Settings(_env_file=None, default_from="USD", default_to="BRL")
    s.init_post_load()
    return s


@pytest.fixture
def rate_table():
    """The BRL-pivot table used throughout the examples."""
    return RateTable(
        {"BRL": Decimal("1.00"), "USD": Decimal("5.60"), "EUR": Decimal("6.10")},
        pivot="BRL",
    )


@pytest.fixture
def parser(settings):
    return AmountParser(settings.number_format)


@pytest.fixture
def vm(rate_table, settings):
    return MainViewModel(rates=rate_table, settings=settings)


@pytest.fixture
def isolated_logging():
    """Restore root logger handlers/level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
