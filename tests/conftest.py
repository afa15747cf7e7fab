"""Pytest configuration and fixtures."""
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root (for ``app``) and src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftcal.calendar.controller import CalendarStateController
from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.models.config import default_cycle_config

BASE_DATE = date(2025, 7, 15)


@pytest.fixture(autouse=True)
def reset_shiftcal_logger():
    """Drop handlers installed by setup_logging so later tests don't write to closed streams."""
    yield
    logger = logging.getLogger("shiftcal")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def default_config():
    """Reference four-team rotation."""
    return default_cycle_config()


@pytest.fixture
def calculator(default_config):
    return ShiftCalculator(default_config)


@pytest.fixture
def controller(calculator):
    """Controller whose 'today' is the reference base date."""
    return CalendarStateController(calculator, clock=lambda: BASE_DATE)
