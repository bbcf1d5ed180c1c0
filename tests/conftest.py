"""Shared test fixtures."""

import pytest

from compactdur.backend import MillisecondsBackend, TimedeltaBackend


@pytest.fixture
def timedelta_backend():
    return TimedeltaBackend()


@pytest.fixture
def milliseconds_backend():
    return MillisecondsBackend()
