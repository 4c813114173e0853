"""
Tests for bookings.py - Default-Parameter Booking Constructors

Tests:
- create_booking leaves unsupplied fields missing
- create_booking_coalesce replaces every falsy value
- create_booking_defaults replaces only absent values
- create_booking_computed resolves the price from the resolved passenger count
- Bookings are displayed and appended to the shared log
"""

import dataclasses

import pytest

from airline_functions import (
    Booking,
    create_booking,
    create_booking_coalesce,
    create_booking_defaults,
    create_booking_computed,
    default_price,
)


class TestCreateBooking:
    """Tests for the constructor without defaults."""

    def test_only_flight_supplied(self, display):
        """Fields that were not supplied stay None."""
        booking = create_booking("LH123", display=display)
        assert booking == Booking("LH123", None, None)

    def test_nothing_supplied(self, display):
        booking = create_booking(display=display)
        assert booking == Booking(None, None, None)

    def test_all_supplied(self, display):
        booking = create_booking("LH123", 2, 450.0, display=display)
        assert booking == Booking("LH123", 2, 450.0)

    def test_displays_header_and_booking(self, display):
        create_booking("LH123", display=display)
        assert display.lines[0] == "Create Booking:"
        assert "LH123" in display.lines[1]

    def test_appends_to_log(self, display, booking_log):
        first = create_booking("LH123", log=booking_log, display=display)
        second = create_booking("LH124", log=booking_log, display=display)
        assert booking_log == [first, second]

    def test_booking_is_immutable(self, display):
        booking = create_booking("LH123", display=display)
        with pytest.raises(dataclasses.FrozenInstanceError):
            booking.price = 10


class TestCreateBookingCoalesce:
    """Tests for falsy-coalescing defaults."""

    def test_all_defaults(self, display):
        booking = create_booking_coalesce(display=display)
        assert booking == Booking("Unknown", 1, 199)

    def test_zero_passengers_replaced(self, display):
        """Zero is falsy, so it is replaced by the default."""
        booking = create_booking_coalesce("LH123", 0, 0, display=display)
        assert booking.passenger_count == 1
        assert booking.price == 199

    def test_empty_flight_replaced(self, display):
        booking = create_booking_coalesce("", 3, 250, display=display)
        assert booking == Booking("Unknown", 3, 250)

    def test_truthy_values_kept(self, display):
        booking = create_booking_coalesce("LH123", 4, 99, display=display)
        assert booking == Booking("LH123", 4, 99)

    def test_header(self, display):
        create_booking_coalesce(display=display)
        assert display.lines[0] == "Create Booking 2:"


class TestCreateBookingDefaults:
    """Tests for literal parameter defaults."""

    def test_all_defaults(self, display):
        booking = create_booking_defaults(display=display)
        assert booking == Booking("Not given", 100, 1299)

    def test_zero_is_kept(self, display):
        """Only None counts as absent; 0 is a real value."""
        booking = create_booking_defaults("LH123", 0, 0, display=display)
        assert booking == Booking("LH123", 0, 0)

    def test_skip_middle_argument(self, display):
        booking = create_booking_defaults("LH123", None, 500, display=display)
        assert booking == Booking("LH123", 100, 500)


class TestCreateBookingComputed:
    """Tests for defaults resolved left to right."""

    def test_all_defaults(self, display):
        """Default count 90 is a small group, so the price is 100."""
        booking = create_booking_computed(display=display)
        assert booking == Booking("Not given", 90, 100)

    def test_price_reads_resolved_count(self, display):
        """A supplied count above the limit gives the large-group price."""
        booking = create_booking_computed("ML52", 188, None, display=display)
        assert booking == Booking("ML52", 188, 160)

    def test_count_at_limit(self, display):
        booking = create_booking_computed("ML52", 100, display=display)
        assert booking.price == 100

    def test_skip_middle_argument_keeps_trailing_position(self, display):
        """None for the count applies its default while 200 still binds to price."""
        booking = create_booking_computed("ML52", None, 200, display=display)
        assert booking == Booking("ML52", 90, 200)

    def test_header(self, display):
        create_booking_computed(display=display)
        assert display.lines[0] == "Create Booking 4:"


class TestDefaultPrice:

    @pytest.mark.parametrize("count,price", [(1, 100), (100, 100), (101, 160), (500, 160)])
    def test_default_price(self, count, price):
        assert default_price(count) == price
