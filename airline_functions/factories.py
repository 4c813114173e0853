"""
factories.py - Functions Returning Functions

The returned function is not called by the factory. It can be kept in a
variable and called later, or called straight away: greet("Hello")("Sarah").
"""

from __future__ import annotations
from typing import Callable, Optional

from .display import Display, CONSOLE


def greet(greeting: str, display: Optional[Display] = None) -> Callable[[str], None]:
    """
    Show ``greeting`` and return a greeter bound to it.

    Example:
        greeter_hey = greet("Hey")
        greeter_hey("Michael")     # Hey, Michael
    """
    display = display if display is not None else CONSOLE
    display(greeting)

    def greeter(name: str) -> None:
        display(f"{greeting}, {name}")

    return greeter


# Same factory written as nested lambdas; the outer call shows nothing.
greet_arrow = lambda greeting, display=None: lambda name: (
    display if display is not None else CONSOLE
)(f"{greeting}, {name}")


def tax_adder(rate: float) -> Callable[[float], float]:
    """Return a function adding ``rate`` tax: amount + amount * rate, unrounded."""
    def add(amount: float) -> float:
        return amount + amount * rate

    return add


def add_tax(rate: float, value: float) -> float:
    """Two-argument tax adder, for partial application of the rate."""
    return value + value * rate
