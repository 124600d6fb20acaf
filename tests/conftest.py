"""Shared pytest fixtures for skycycle tests."""

from datetime import datetime, timezone

import pytest

from skycycle.core.clock import GeoLocation, SimClock


@pytest.fixture
def cologne():
    """Default observer (Cologne, UTC+1)."""
    return GeoLocation(50.9375, 6.9603, 1)


@pytest.fixture
def summer_clock():
    """Local solar noon-ish on the June solstice."""
    return SimClock(2024, 6, 21, 12.5)


@pytest.fixture
def solstice_noon_utc():
    """Close to Cologne's solar noon on the June solstice, in UTC."""
    return datetime(2024, 6, 21, 11, 34, tzinfo=timezone.utc)


@pytest.fixture
def full_moon_utc():
    """Full moon of April 2024."""
    return datetime(2024, 4, 23, 23, 49, tzinfo=timezone.utc)


@pytest.fixture
def new_moon_utc():
    """New moon of April 2024 (total solar eclipse)."""
    return datetime(2024, 4, 8, 18, 21, tzinfo=timezone.utc)
