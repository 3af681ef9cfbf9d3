"""Shared anchor sets for the test suite."""

import pytest


@pytest.fixture
def square():
    return [(0, 0), (100, 0), (100, 100), (0, 100)]


@pytest.fixture
def wave():
    return [(0, 0), (40, 60), (90, 20), (150, 80), (210, 10), (260, 50)]


@pytest.fixture
def arch():
    return [(0, 0), (50, 50), (100, 0)]
