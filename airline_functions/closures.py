"""
closures.py - Immediately-Invoked Blocks and Closures

A closure is a function together with the variables of the scope it was
defined in. Those variables stay alive after the defining call returns and
can only be reached through the function.

1. invoke()                - decorator that runs a block once, binding its result
2. install_header()        - one-off setup with private state wired to "click"
3. private_counter_block() - counter that lives only inside its block
4. secure_booking()        - passenger counter captured with nonlocal
5. FunctionSlot, assign_g(), assign_h() - rebinding a shared slot to new closures
6. board_passengers()      - timer callback that outlives its enclosing call
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from .display import Display, CONSOLE
from .scheduler import EventTarget, TimerQueue

T = TypeVar("T")


# ============================================================================
# IMMEDIATELY-INVOKED BLOCKS
# ============================================================================

def invoke(fn: Callable[[], T]) -> T:
    """
    Run ``fn`` once, right where it is defined.

    Used as a decorator, the decorated name is bound to the block's result.
    The block function itself is never reachable afterwards.

        @invoke
        def answer():
            return 42
        # answer == 42
    """
    return fn()


@dataclass
class Header:
    """Page heading with a colour."""
    text: str
    color: str


def install_header(page: EventTarget, display: Optional[Display] = None) -> Callable[[], str]:
    """
    Set up a red page header that turns blue on "click".

    The header record and its click handler live only inside the block.
    Only a read-only colour accessor escapes.
    """
    display = display if display is not None else CONSOLE

    @invoke
    def header_color() -> Callable[[], str]:
        header = Header("Functions", "red")

        def paint_blue() -> None:
            header.color = "blue"
            display(f"Header colour is now {header.color}")

        page.add_event_listener("click", paint_blue)
        display("This will never run again")
        return lambda: header.color

    return header_color


def private_counter_block(display: Optional[Display] = None) -> Callable[[], int]:
    """Run a block whose counter is private. Only ``increment`` escapes."""
    display = display if display is not None else CONSOLE

    @invoke
    def increment() -> Callable[[], int]:
        count = 0

        def bump() -> int:
            nonlocal count
            count += 1
            display(f"Private count: {count}")
            return count

        return bump

    return increment


# ============================================================================
# CLOSURES
# ============================================================================

def secure_booking(display: Optional[Display] = None) -> Callable[[], int]:
    """
    Return a booker that counts passengers.

    Each call to secure_booking() creates a fresh counter, so two bookers
    never share a count.
    """
    display = display if display is not None else CONSOLE
    passenger_count = 0

    def booker() -> int:
        nonlocal passenger_count
        passenger_count += 1
        display(f"{passenger_count} passengers")
        return passenger_count

    return booker


def captured_values(fn: Callable[..., Any]) -> Dict[str, Any]:
    """Variables ``fn`` closes over, by name, with their current values."""
    code = getattr(fn, "__code__", None)
    cells = getattr(fn, "__closure__", None) or ()
    if code is None:
        return {}
    return {name: cell.cell_contents for name, cell in zip(code.co_freevars, cells)}


class FunctionSlot:
    """
    Single callable slot that assign_g() and assign_h() overwrite.

    Calling the slot calls whichever closure was stored last. The state of
    a replaced closure is no longer reachable from the slot.
    """

    def __init__(self):
        self.current: Optional[Callable[[], Any]] = None

    def __call__(self) -> Any:
        if self.current is None:
            return None
        return self.current()


def assign_g(slot: FunctionSlot, display: Optional[Display] = None) -> None:
    """Store a closure over a = 23 in the slot."""
    display = display if display is not None else CONSOLE
    a = 23

    def f() -> int:
        display(a * 2)
        return a * 2

    slot.current = f


def assign_h(slot: FunctionSlot, display: Optional[Display] = None) -> None:
    """Replace the slot's closure with one over b = 777."""
    display = display if display is not None else CONSOLE
    b = 777

    def f() -> int:
        display(b * 2)
        return b * 2

    slot.current = f


def board_passengers(
    n: int,
    wait_seconds: float,
    timers: TimerQueue,
    display: Optional[Display] = None,
) -> int:
    """
    Schedule boarding after ``wait_seconds`` and return the timer id.

    The callback still sees ``n`` and ``per_group`` when it fires, long
    after this function has returned.
    """
    display = display if display is not None else CONSOLE
    per_group = n / 3

    def announce() -> None:
        display(f"We are now boarding all {n} passengers")
        display(f"There are 3 groups, each with {per_group:g} passengers")

    timer_id = timers.schedule(announce, wait_seconds * 1000)
    display(f"Will start boarding in {wait_seconds} seconds")
    return timer_id
