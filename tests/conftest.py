"""Shared test fixtures."""

import pytest

from pytimespan import Timespan


@pytest.fixture
def zero():
    return Timespan()


@pytest.fixture
def ninety_seconds():
    return Timespan.from_units(0, 1, 30)


@pytest.fixture
def negative_hour():
    return Timespan.from_units(0, 0, -3600)
