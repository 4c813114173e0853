"""
receivers.py - Airlines and Explicit Receivers

An Airline owns a list of bookings. Airline.book() reads the receiver's name
and code and appends to the receiver's bookings. The same operation can be
invoked three ways, and every one appends structurally identical records:

1. As a bound method:           lufthansa.book(239, "Michael McCann")
2. With an explicit receiver:   call(Airline.book, eurowings, 23, "Sarah Williams")
                                apply(Airline.book, swiss, (583, "Mary Cooper"))
3. Partially applied:           book_ew23 = bind(Airline.book, eurowings, 23)
                                book_ew23("Jonas"); book_ew23("Martha")

bind() with a None receiver only pre-binds arguments, which shows that
choosing a receiver and fixing leading arguments are separate things:

    add_vat = bind(add_tax, None, 0.23)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, List, Sequence

from .core import AirlineBooking
from .display import Display, CONSOLE


@dataclass
class Airline:
    """
    Airline record with a book() operation bound to it.

    Attributes:
        name: Display name (e.g., "Lufthansa")
        code: IATA code prefixed to flight numbers (e.g., "LH")
        bookings: Seats booked so far, in booking order
        planes: Fleet size, grown by buy_plane()
        display: Where book() and buy_plane() report (excluded from equality)
    """
    name: str
    code: str
    bookings: List[AirlineBooking] = field(default_factory=list)
    planes: int = 0
    display: Display = field(default=CONSOLE, repr=False, compare=False)

    def book(self, flight_num: Any, passenger_name: str) -> AirlineBooking:
        """Book a seat on flight ``{code}{flight_num}`` for a passenger."""
        self.display(
            f"{passenger_name} booked a seat on {self.name} flight {self.code}{flight_num}"
        )
        booking = AirlineBooking(f"{self.code}{flight_num}", passenger_name)
        self.bookings.append(booking)
        return booking

    def buy_plane(self) -> int:
        """Grow the fleet by one plane and show the new count."""
        self.planes += 1
        self.display(self.planes)
        return self.planes


def call(fn: Callable[..., Any], receiver: Any, *args: Any) -> Any:
    """Invoke ``fn`` with ``receiver`` as its first argument, followed by ``args``."""
    return fn(receiver, *args)


def apply(fn: Callable[..., Any], receiver: Any, args: Sequence[Any] = ()) -> Any:
    """Like call(), but the remaining arguments arrive as one sequence."""
    return fn(receiver, *args)


def bind(fn: Callable[..., Any], receiver: Any = None, *args: Any) -> Callable[..., Any]:
    """
    Return ``fn`` with its receiver and leading arguments fixed.

    Args:
        fn: Operation to bind (e.g., Airline.book or a plain function)
        receiver: Object passed as the first argument, or None to bind no receiver
        *args: Leading arguments to pre-supply

    Returns:
        A functools.partial that takes only the remaining arguments and can be
        called any number of times.
    """
    if receiver is None:
        return partial(fn, *args)
    return partial(fn, receiver, *args)
