"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- car / motorbike: Vehicles for fee-paying and exempt cases
- stockholm: The default time zone as a ZoneInfo
- weekday: A regular, non-holiday weekday outside July
- restore_logging: Puts the root logger back after logging tests
"""

import datetime
import logging
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from tollcalc.core.models import Vehicle


@pytest.fixture
def car():
    """A regular fee-paying vehicle."""
    return Vehicle.car()


@pytest.fixture
def motorbike():
    """A toll-free vehicle."""
    return Vehicle.motorbike()


@pytest.fixture
def stockholm():
    return ZoneInfo("Europe/Stockholm")


@pytest.fixture
def weekday():
    """Tuesday 2024-03-05: not a weekend, not a holiday, not July."""
    return datetime.date(2024, 3, 5)


@pytest.fixture
def at(weekday):
    """
    Build naive passages on the weekday fixture.

    Usage:
        at(6, 15) -> datetime.datetime(2024, 3, 5, 6, 15)
    """

    def _at(hour: int, minute: int, second: int = 0) -> datetime.datetime:
        return datetime.datetime.combine(weekday, datetime.time(hour, minute, second))

    return _at


@pytest.fixture
def restore_logging():
    """Save and restore root logger handlers and level around a test."""
    root_logger = logging.getLogger()
    old_handlers = list(root_logger.handlers)
    old_level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in old_handlers:
            handler.close()
    root_logger.handlers[:] = old_handlers
    root_logger.setLevel(old_level)
