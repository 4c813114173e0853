"""
passengers.py - Check-In and Argument Passing

1. check_in()        - Passport-gated check-in with a missing-passenger guard
2. change_value()    - Rebinding a parameter never reaches the caller
3. change_complex()  - Mutating a passed record is seen by the caller
4. passenger_record() - Mutable copy of a Passenger to experiment on safely

Python passes object references by value. Rebinding a parameter name inside
a function only changes the local name, while mutating the object it points
to changes the caller's object as well.
"""

from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, FrozenSet, Optional

from .core import (
    Passenger, CheckInResult,
    APPROVED_PASSPORTS, DEFAULT_FLIGHT, GENDER_MALE,
)
from .display import Display, CONSOLE


def display_name(passenger: Passenger) -> str:
    """Name with a title: "Mr." for M, "Mrs." for anything else."""
    title = "Mr. " if passenger.gender == GENDER_MALE else "Mrs. "
    return title + passenger.name


def check_in(
    flight_number: Optional[str] = None,
    passenger: Optional[Passenger] = None,
    approved: FrozenSet[int] = APPROVED_PASSPORTS,
    display: Optional[Display] = None,
) -> CheckInResult:
    """
    Check a passenger in for a flight.

    Args:
        flight_number: Flight code (default: "Unknown")
        passenger: Traveller to check in; None reports an error and stops
        approved: Passport numbers cleared for travel
        display: Where the confirmation or error goes

    Returns:
        CHECKED_IN on success, MISSING_PASSENGER when no passenger was given,
        NOT_CLEARED when the passport is not approved. A passenger who is not
        cleared produces no output.
    """
    display = display if display is not None else CONSOLE
    if flight_number is None:
        flight_number = DEFAULT_FLIGHT

    if passenger is None:
        display("An error has occurred, a valid passenger object has not been provided.")
        return CheckInResult.MISSING_PASSENGER

    name = display_name(passenger)
    if passenger.passport_number not in approved:
        return CheckInResult.NOT_CLEARED

    display(
        f"{name} of passport number: {passenger.passport_number}, "
        f"has checked in for flight: {flight_number}"
    )
    return CheckInResult.CHECKED_IN


def change_value(value: str, display: Optional[Display] = None) -> None:
    """Rebind the local parameter. The caller's variable keeps its value."""
    display = display if display is not None else CONSOLE
    value = "Goodbye"
    display(value)


def change_complex(record: Dict[str, Any], display: Optional[Display] = None) -> None:
    """Rename the passenger in place. The caller's dict is the same object."""
    display = display if display is not None else CONSOLE
    record["name"] = "This is Jimmy"
    display(record["name"])


def passenger_record(passenger: Passenger) -> Dict[str, Any]:
    """Fresh mutable dict copy of a passenger; changes never reach the original."""
    return asdict(passenger)
