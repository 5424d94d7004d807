"""Pytest configuration and fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest

from epicycles.config import reset_config
from epicycles.models import Complex


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def unit_circle_signal():
    """Four samples of the unit circle, counter-clockwise from (1, 0)."""
    return [Complex(1, 0), Complex(0, 1), Complex(-1, 0), Complex(0, -1)]


@pytest.fixture
def irregular_signal():
    """A lopsided closed polygon with no symmetry to hide behind."""
    points = [
        (3.0, 0.5),
        (2.2, 2.9),
        (0.4, 3.3),
        (-1.8, 2.0),
        (-2.9, -0.4),
        (-1.1, -2.6),
        (0.9, -1.7),
        (2.6, -2.2),
        (3.4, -0.9),
    ]
    return [Complex(x, y) for x, y in points]
