"""Pytest configuration and shared fixtures."""

import pytest

from lambda_app.capture import shared_state
from lambda_app.config.defaults import SharedStateParams
from lambda_app.logging.config import configure_logging


EXPECTED_DEMO_LINES = [
    "15", "18", "15",
    "30", "10", "200",
    "Hello, Python!", "Hello, Python 3!",
    "50", "30", "100",
    "2", "0",
    "30", "2010",
    "20", "30",
    "0", "15", "0",
    "Tom",
    "11", "6", "4",
]


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog output off stdout during tests."""
    configure_logging(level="WARNING", cache_logger_on_first_use=False)
    yield


@pytest.fixture(autouse=True)
def fresh_shared_state():
    """Reset the process-wide shared state around every test."""
    shared_state.reset(SharedStateParams())
    yield shared_state
    shared_state.reset(SharedStateParams())


@pytest.fixture
def expected_demo_lines() -> list[str]:
    """Lines the full demonstration prints, in order."""
    return list(EXPECTED_DEMO_LINES)


@pytest.fixture
def one_to_nine() -> list[int]:
    return [1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.fixture
def minus_five_to_five() -> list[int]:
    return list(range(-5, 6))
