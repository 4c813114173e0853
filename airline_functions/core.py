"""
Core types and constants for the airline function lessons.

This module provides the shared vocabulary every lesson builds on:
1. Constants: defaults, sample passengers, approved passports, string tags
2. Immutable data structures: Booking, Passenger, AirlineBooking
3. Enums: CheckInResult
4. Protocols: AnswerHolder for receiver-substituted poll display
5. Exceptions: AirlineFunctionsError and its subclasses

Nothing here prints or mutates shared state.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, List, Optional, Protocol, Sequence, runtime_checkable


# ============================================================================
# CONSTANTS
# ============================================================================

# Fallback flight used by check_in() when no flight is supplied.
DEFAULT_FLIGHT = "Unknown"

# Falsy-coalescing booking defaults (create_booking_coalesce).
COALESCE_FLIGHT = "Unknown"
COALESCE_PASSENGERS = 1
COALESCE_PRICE = 199

# Literal parameter defaults (create_booking_defaults).
DEFAULT_BOOKING_FLIGHT = "Not given"
DEFAULT_BOOKING_PASSENGERS = 100
DEFAULT_BOOKING_PRICE = 1299

# Computed defaults (create_booking_computed). Price depends on the resolved
# passenger count: small groups pay the lower fare.
COMPUTED_BOOKING_PASSENGERS = 90
SMALL_GROUP_LIMIT = 100
SMALL_GROUP_PRICE = 100
LARGE_GROUP_PRICE = 160

# Gender codes (strings, not enum, matching the record data).
GENDER_MALE = "M"
GENDER_FEMALE = "F"

# Food tags for callback dispatch in eat().
FOOD_PIZZA = "pizza"
FOOD_MIKANS = "mikans"

# Poll result display modes.
RESULTS_ARRAY = "array"
RESULTS_STRING = "string"


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Callable that receives a prompt and returns the raw text typed by the user.
InputSource = Callable[[str], str]

# Zero-argument callback fired by a timer or an event target.
Callback = Callable[[], None]


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class AnswerHolder(Protocol):
    """
    Anything that carries a sequence of integer answer counters.

    display_results() only reads this attribute, so a Poll, a plain
    namespace or any other record with an ``answers`` field can be shown.
    """

    answers: Sequence[int]


# ============================================================================
# ENUMS
# ============================================================================

class CheckInResult(Enum):
    """
    Outcome of a check-in attempt.

    CHECKED_IN: Passport approved, confirmation displayed.
    MISSING_PASSENGER: No passenger supplied, error displayed.
    NOT_CLEARED: Passport not approved, nothing displayed.
    """
    CHECKED_IN = "checked_in"
    MISSING_PASSENGER = "missing_passenger"
    NOT_CLEARED = "not_cleared"


# ============================================================================
# EXCEPTIONS
# ============================================================================

class AirlineFunctionsError(Exception):
    """Base exception for all lesson errors."""
    pass


class InvalidPollDefinition(AirlineFunctionsError):
    """Raised when a poll is created without a question or without options."""
    pass


class InvalidDelay(AirlineFunctionsError):
    """Raised when a timer is scheduled with a negative or non-finite delay."""
    pass


# ============================================================================
# CORE DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True, slots=True)
class Booking:
    """
    A single flight booking.

    Attributes:
        flight_number: Flight code, or None when it was never supplied.
        passenger_count: Number of passengers, or None when never supplied.
        price: Ticket price, or None when never supplied.

    None is the explicit "missing" marker. Bookings are never mutated once
    created.
    """
    flight_number: Optional[str] = None
    passenger_count: Optional[int] = None
    price: Optional[float] = None


# Ordered, append-only collection of bookings shared by the booking lessons.
BookingLog = List[Booking]


@dataclass(frozen=True, slots=True)
class Passenger:
    """
    Sample traveller used as a check-in lookup key.

    Attributes:
        name: Full name.
        passport_number: Looked up in the approved passport set.
        gender: GENDER_MALE or GENDER_FEMALE.
    """
    name: str
    passport_number: int
    gender: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Passenger name cannot be empty")
        if self.gender not in (GENDER_MALE, GENDER_FEMALE):
            raise ValueError(f"Passenger gender must be M or F, got {self.gender!r}")


@dataclass(frozen=True, slots=True)
class AirlineBooking:
    """One seat booked through Airline.book(): flight reference plus passenger."""
    flight: str
    passenger_name: str


# ============================================================================
# SAMPLE DATA
# ============================================================================

MICHAEL = Passenger("Michael McCann", 48322815, GENDER_MALE)
SARAH = Passenger("Sarah Kerrigan", 11268432, GENDER_FEMALE)
# Not cleared for travel.
ARCTURUS = Passenger("Arcturus Mengsk", 11265576, GENDER_MALE)

APPROVED_PASSPORTS: FrozenSet[int] = frozenset({48322815, 11268432})
