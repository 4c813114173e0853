"""
bookings.py - Default-Parameter Booking Constructors

Four ways of filling in booking fields the caller did not supply:

1. create_booking()          - no defaults, missing fields stay None
2. create_booking_coalesce() - falsy coalescing with ``or``; 0 and "" are replaced too
3. create_booking_defaults() - literal defaults, applied only when a field is None
4. create_booking_computed() - defaults resolved left to right, price reads
                               the already-resolved passenger count

Passing None for a middle argument skips it: its default is applied while
the following argument is still bound by position.

    create_booking_computed("ML52", None, 200)
    # Booking(flight_number='ML52', passenger_count=90, price=200)
"""

from __future__ import annotations
from typing import Optional

from .core import (
    Booking, BookingLog,
    COALESCE_FLIGHT, COALESCE_PASSENGERS, COALESCE_PRICE,
    DEFAULT_BOOKING_FLIGHT, DEFAULT_BOOKING_PASSENGERS, DEFAULT_BOOKING_PRICE,
    COMPUTED_BOOKING_PASSENGERS, SMALL_GROUP_LIMIT, SMALL_GROUP_PRICE, LARGE_GROUP_PRICE,
)
from .display import Display, CONSOLE


def _record(
    title: str,
    booking: Booking,
    log: Optional[BookingLog],
    display: Optional[Display],
) -> Booking:
    """Show the booking under its header and append it to the log."""
    display = display if display is not None else CONSOLE
    display(f"{title}:")
    display(booking)
    if log is not None:
        log.append(booking)
    return booking


def create_booking(
    flight_number: Optional[str] = None,
    passenger_count: Optional[int] = None,
    price: Optional[float] = None,
    log: Optional[BookingLog] = None,
    display: Optional[Display] = None,
) -> Booking:
    """
    Create a booking with no defaults.

    Whatever the caller left out is stored as None, so
    create_booking("LH123") gives an incomplete booking.
    """
    booking = Booking(flight_number, passenger_count, price)
    return _record("Create Booking", booking, log, display)


def create_booking_coalesce(
    flight_number: Optional[str] = None,
    passenger_count: Optional[int] = None,
    price: Optional[float] = None,
    log: Optional[BookingLog] = None,
    display: Optional[Display] = None,
) -> Booking:
    """
    Create a booking using ``or`` to fill in defaults.

    Any falsy value is replaced, not only None: a passenger count of 0
    becomes 1 and an empty flight number becomes "Unknown".
    """
    flight_number = flight_number or COALESCE_FLIGHT
    passenger_count = passenger_count or COALESCE_PASSENGERS
    price = price or COALESCE_PRICE

    booking = Booking(flight_number, passenger_count, price)
    return _record("Create Booking 2", booking, log, display)


def create_booking_defaults(
    flight_number: Optional[str] = None,
    passenger_count: Optional[int] = None,
    price: Optional[float] = None,
    log: Optional[BookingLog] = None,
    display: Optional[Display] = None,
) -> Booking:
    """
    Create a booking with literal defaults for absent fields.

    Only None counts as absent. Falsy values such as 0 are kept as given.
    """
    if flight_number is None:
        flight_number = DEFAULT_BOOKING_FLIGHT
    if passenger_count is None:
        passenger_count = DEFAULT_BOOKING_PASSENGERS
    if price is None:
        price = DEFAULT_BOOKING_PRICE

    booking = Booking(flight_number, passenger_count, price)
    return _record("Create Booking 3", booking, log, display)


def default_price(passenger_count: int) -> int:
    """Fare for a group: the small group price up to SMALL_GROUP_LIMIT passengers."""
    return SMALL_GROUP_PRICE if passenger_count <= SMALL_GROUP_LIMIT else LARGE_GROUP_PRICE


def create_booking_computed(
    flight_number: Optional[str] = None,
    passenger_count: Optional[int] = None,
    price: Optional[float] = None,
    log: Optional[BookingLog] = None,
    display: Optional[Display] = None,
) -> Booking:
    """
    Create a booking whose defaults are computed in parameter order.

    Python evaluates default expressions once, at definition time, and they
    cannot see other parameters. The defaults are therefore resolved in the
    body, left to right, so the price default reads the resolved passenger
    count rather than its raw default.

    Args:
        flight_number: Flight code (default: "Not given")
        passenger_count: Number of passengers (default: 90)
        price: Ticket price (default: 100 for up to 100 passengers, else 160)
        log: Booking log to append to
        display: Where to show the booking

    Returns:
        The new Booking.
    """
    if flight_number is None:
        flight_number = DEFAULT_BOOKING_FLIGHT
    if passenger_count is None:
        passenger_count = COMPUTED_BOOKING_PASSENGERS
    if price is None:
        price = default_price(passenger_count)

    booking = Booking(flight_number, passenger_count, price)
    return _record("Create Booking 4", booking, log, display)
