"""Shared fixtures for core generator tests."""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from simrand.core.simple_random import SimpleRandom

EASTERN_STANDARD = timezone(timedelta(hours=-5))

# Wall-clock time reported while the clock is frozen
FROZEN_NOW = datetime(2015, 11, 26, 12, 1, 15, tzinfo=EASTERN_STANDARD)
FROZEN_NOW_SEEDS = (628393424, 2245012672)


@pytest.fixture
def generator() -> SimpleRandom:
    """Provide a generator built with the default seeds."""
    return SimpleRandom()


@pytest.fixture
def frozen_clock() -> Iterator[datetime]:
    """Freeze the clock used for time-based seeding."""
    with patch("simrand.core.seeds.current_time", return_value=FROZEN_NOW):
        yield FROZEN_NOW
