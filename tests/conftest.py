"""
conftest.py - Shared pytest fixtures for airline_functions tests

Provides common fixtures used across unit, conformance and runner tests:
- A silent recording display
- Airlines ready to book
- Timer queue and event target
- A four-option poll
"""

import pytest

from airline_functions import (
    Airline, Display, EventTarget, Poll, TimerQueue,
    DemoConfig, Fixtures,
)


# =============================================================================
# BASIC FIXTURES
# =============================================================================

@pytest.fixture
def display():
    """Display that records lines without printing."""
    return Display(verbose=False)


@pytest.fixture
def booking_log():
    """Empty booking log."""
    return []


@pytest.fixture
def timers():
    """Virtual-clock timer queue at t=0."""
    return TimerQueue()


@pytest.fixture
def page():
    """Event target with no listeners."""
    return EventTarget("page")


# =============================================================================
# AIRLINE FIXTURES
# =============================================================================

@pytest.fixture
def lufthansa(display):
    return Airline("Lufthansa", "LH", planes=300, display=display)


@pytest.fixture
def eurowings(display):
    return Airline("Eurowings", "EW", display=display)


@pytest.fixture
def swiss(display):
    return Airline("Swiss Air Lines", "LX", display=display)


# =============================================================================
# POLL FIXTURES
# =============================================================================

@pytest.fixture
def poll(display):
    """Four-option poll with zeroed counters."""
    return Poll.create(
        "What is your favourite programming language?",
        ["1: JavaScript", "2: Python", "3: Rust", "4: C++"],
        display,
    )


# =============================================================================
# RUNNER FIXTURES
# =============================================================================

@pytest.fixture
def demo_fixtures(display):
    """Runner fixtures sharing the silent display."""
    return Fixtures.create(display)


@pytest.fixture
def demo_config():
    return DemoConfig()
