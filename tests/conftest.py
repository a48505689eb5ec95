"""
Test configuration and fixtures for palettekit tests.
"""
import pytest

from palettekit.colors.model import Color


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from palettekit.observability import get_metrics_collector
    get_metrics_collector().reset()


@pytest.fixture
def red():
    return Color(255, 0, 0, 255)


@pytest.fixture
def green():
    return Color(0, 255, 0, 255)


@pytest.fixture
def blue():
    return Color(0, 0, 255, 255)


@pytest.fixture
def cyan():
    return Color(0, 255, 255, 255)
