"""
runner.py - Demonstration Runner

Runs every lesson once, top to bottom. Each lesson receives the shared
fixtures explicitly, so no lesson depends on hidden module state:

    fixtures = run_all(DemoConfig(), Fixtures.create(Display()))

Lessons:
  1-2:   Arguments      - default parameters, value vs. reference
  3-5:   Functions      - callbacks, higher-order dispatch, returned functions
  6-7:   Receivers      - call/apply/bind, partial application without a receiver
  8-10:  Closures       - immediately-invoked blocks, closures, timers
  11:    Poll           - tally and receiver-substituted results
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional, Tuple

from .core import (
    Booking, InputSource,
    MICHAEL, SARAH, ARCTURUS,
    FOOD_PIZZA, FOOD_MIKANS,
    RESULTS_STRING,
)
from .display import Display
from .bookings import (
    create_booking, create_booking_coalesce,
    create_booking_defaults, create_booking_computed,
)
from .passengers import check_in, change_value, change_complex
from .callbacks import (
    one_word, upper_first_word, transformer,
    eat, eat_pizza, eat_mikan,
    high5, greet_each, spell_out,
)
from .factories import greet, greet_arrow, tax_adder, add_tax
from .receivers import Airline, call, apply, bind
from .closures import (
    install_header, private_counter_block,
    secure_booking, captured_values,
    FunctionSlot, assign_g, assign_h,
    board_passengers,
)
from .scheduler import EventTarget, TimerQueue
from .poll import Poll


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Inputs for every lesson. Modify these to experiment."""
    flight: str = "LH234"

    # Returned functions
    greeting_names: Tuple[str, ...] = ("Michael", "Sarah", "Chrissy")
    tax_rates: Tuple[float, ...] = (0.1, 0.175)
    taxed_amount: float = 200

    # Callbacks
    sample_text: str = "Hello my cheeky chango"
    names: Tuple[str, ...] = ("James", "Sarah", "Samir", "Arcturus")
    pizza_slices: int = 12
    mikans: int = 20

    # Receivers
    vat_rate: float = 0.23

    # Timers
    boarding_passengers: int = 180
    boarding_wait_seconds: float = 3
    realtime_timers: bool = False

    # Poll
    poll_question: str = "What is your favourite programming language?"
    poll_options: Tuple[str, ...] = ("1: JavaScript", "2: Python", "3: Rust", "4: C++")
    poll_answers: Tuple[str, ...] = ("2", "2", "9")


@dataclass
class Fixtures:
    """Shared inputs handed to each lesson."""
    display: Display
    bookings: List[Booking] = field(default_factory=list)
    airlines: Dict[str, Airline] = field(default_factory=dict)
    timers: TimerQueue = field(default_factory=TimerQueue)
    page: EventTarget = field(default_factory=EventTarget)
    input_source: Optional[InputSource] = None
    poll: Optional[Poll] = None

    @classmethod
    def create(
        cls,
        display: Display,
        input_source: Optional[InputSource] = None,
        realtime: bool = False,
    ) -> 'Fixtures':
        """Fixtures with Lufthansa, Eurowings and Swiss ready to book."""
        airlines = {
            "lufthansa": Airline("Lufthansa", "LH", planes=300, display=display),
            "eurowings": Airline("Eurowings", "EW", display=display),
            "swiss": Airline("Swiss Air Lines", "LX", display=display),
        }
        return cls(
            display=display,
            airlines=airlines,
            timers=TimerQueue(realtime=realtime),
            input_source=input_source,
        )


Lesson = Callable[[Fixtures, DemoConfig], None]


def section_header(display: Display, text: str) -> None:
    display(f"--- {text} ---")


# ============================================================================
# ARGUMENTS (Lessons 1-2)
# ============================================================================

def step_01_default_parameters(fx: Fixtures, config: DemoConfig) -> None:
    """Four default-parameter policies, including skipping a middle argument."""
    show = fx.display
    create_booking("LH123", log=fx.bookings, display=show)
    create_booking_coalesce(log=fx.bookings, display=show)
    create_booking_defaults(log=fx.bookings, display=show)
    create_booking_computed(log=fx.bookings, display=show)
    create_booking_computed("ML52", 188, None, fx.bookings, show)
    create_booking_computed("ML52", None, 200, fx.bookings, show)


def step_02_value_vs_reference(fx: Fixtures, config: DemoConfig) -> None:
    """Check-in guard, then rebinding vs. mutating arguments."""
    show = fx.display
    section_header(show, "Check in")
    check_in(config.flight, MICHAEL, display=show)
    check_in(config.flight, None, display=show)
    check_in(None, MICHAEL, display=show)
    check_in(None, None, display=show)
    check_in(config.flight, SARAH, display=show)
    check_in(config.flight, ARCTURUS, display=show)

    section_header(show, "Values")
    simple = "Hello"
    show(f"Before: {simple}")
    change_value(simple, show)
    show(f"After: {simple}")

    section_header(show, "References")
    complex_record = {"name": "James Raynor", "passport_number": 11987657, "gender": "M"}
    show(f"Before: {complex_record['name']}")
    change_complex(complex_record, show)
    show(f"After: {complex_record['name']}")


# ============================================================================
# FUNCTIONS (Lessons 3-5)
# ============================================================================

def step_03_callbacks(fx: Fixtures, config: DemoConfig) -> None:
    """Pass transformers into a higher-order function."""
    show = fx.display
    show(one_word(config.sample_text))
    show(upper_first_word(config.sample_text))
    transformer(config.sample_text, one_word, show)
    transformer(config.sample_text, upper_first_word, show)

    fx.page.add_event_listener("click", lambda: high5(show))
    greet_each(config.names, high5, show)
    spell_out(MICHAEL.name, show)


def step_04_callback_dispatch(fx: Fixtures, config: DemoConfig) -> None:
    """Dispatch on an explicit food tag instead of the callback's name."""
    eat(eat_pizza, config.pizza_slices, FOOD_PIZZA, fx.display)
    eat(eat_mikan, config.mikans, FOOD_MIKANS, fx.display)


def step_05_returned_functions(fx: Fixtures, config: DemoConfig) -> None:
    """Keep a returned function for later, or call it straight away."""
    show = fx.display
    first, second, third = config.greeting_names
    greeter_hey = greet("Hey", show)
    greeter_hey(first)
    greet("Hello", show)(second)
    greet_arrow("Yo", show)(third)

    for rate in config.tax_rates:
        show(f"Tax at {rate}: {tax_adder(rate)(config.taxed_amount)}")


# ============================================================================
# RECEIVERS (Lessons 6-7)
# ============================================================================

def step_06_explicit_receivers(fx: Fixtures, config: DemoConfig) -> None:
    """The same book() operation, three ways of supplying its receiver."""
    show = fx.display
    lufthansa = fx.airlines["lufthansa"]
    eurowings = fx.airlines["eurowings"]
    swiss = fx.airlines["swiss"]

    lufthansa.book(239, "Michael McCann")
    lufthansa.book(635, "John Smith")

    book = Airline.book
    call(book, eurowings, 23, "Sarah Williams")
    call(book, lufthansa, 239, "Mary Cooper")
    flight_data = (583, "George Cooper")
    apply(book, swiss, flight_data)

    book_ew = bind(book, eurowings)
    book_ew(23, "Steven Williams")
    book_ew23 = bind(book, eurowings, 23)
    book_ew23("Jonas Schmedtmann")
    book_ew23("Martha Cooper")

    for airline in fx.airlines.values():
        show(f"{airline.name}: {len(airline.bookings)} bookings")

    fx.page.add_event_listener("click", lufthansa.buy_plane)


def step_07_partial_without_receiver(fx: Fixtures, config: DemoConfig) -> None:
    """Pre-bind the rate without any receiver."""
    show = fx.display
    show(add_tax(0.1, 200))
    add_vat = bind(add_tax, None, config.vat_rate)
    show(add_vat(100))
    show(add_vat(23))
    add_vat_closure = tax_adder(config.vat_rate)
    show(add_vat_closure(100))


# ============================================================================
# CLOSURES (Lessons 8-10)
# ============================================================================

def step_08_immediately_invoked(fx: Fixtures, config: DemoConfig) -> None:
    """Blocks that run once and keep their state private."""
    show = fx.display
    header_color = install_header(fx.page, show)
    show(f"Header colour: {header_color()}")
    increment = private_counter_block(show)
    increment()
    increment()


def step_09_closures(fx: Fixtures, config: DemoConfig) -> None:
    """Captured counters survive their factory and are never shared."""
    show = fx.display
    booker = secure_booking(show)
    booker()
    booker()
    booker()
    other_booker = secure_booking(show)
    other_booker()
    show(f"Captured by booker: {captured_values(booker)['passenger_count']}")

    slot = FunctionSlot()
    assign_g(slot, show)
    slot()
    show(f"Captured: {captured_values(slot.current)['a']}")
    assign_h(slot, show)
    slot()
    show(f"Captured: {captured_values(slot.current)['b']}")


def step_10_timers(fx: Fixtures, config: DemoConfig) -> None:
    """A scheduled callback still sees the variables of its finished caller."""
    board_passengers(
        config.boarding_passengers, config.boarding_wait_seconds, fx.timers, fx.display
    )


# ============================================================================
# POLL (Lesson 11)
# ============================================================================

def step_11_poll_tally(fx: Fixtures, config: DemoConfig) -> None:
    """Tally answers, ignore invalid ones, show any poll-shaped record."""
    show = fx.display
    poll = Poll.create(config.poll_question, config.poll_options, show)
    fx.poll = poll

    if fx.input_source is None:
        for raw in config.poll_answers:
            poll.answer(raw)
    else:
        for _ in config.poll_answers:
            poll.register_new_answer(fx.input_source)

    poll.display_results(RESULTS_STRING)
    for answers in ([5, 2, 3], [1, 5, 3, 9, 6, 1]):
        borrowed = SimpleNamespace(answers=answers, display=show)
        call(Poll.display_results, borrowed)
        call(Poll.display_results, borrowed, RESULTS_STRING)


LESSONS: List[Tuple[str, Lesson]] = [
    ("Default Parameters", step_01_default_parameters),
    ("Value vs. Reference", step_02_value_vs_reference),
    ("Callbacks", step_03_callbacks),
    ("Callback Dispatch", step_04_callback_dispatch),
    ("Functions Returning Functions", step_05_returned_functions),
    ("Explicit Receivers", step_06_explicit_receivers),
    ("Partial Application Without a Receiver", step_07_partial_without_receiver),
    ("Immediately-Invoked Blocks", step_08_immediately_invoked),
    ("Closures", step_09_closures),
    ("Timers", step_10_timers),
    ("Poll Tally", step_11_poll_tally),
]


def run_all(
    config: Optional[DemoConfig] = None,
    fixtures: Optional[Fixtures] = None,
    pause: Optional[Callable[[], None]] = None,
) -> Fixtures:
    """
    Run every lesson once, in order.

    After the last lesson the page is clicked once and the timer queue is
    drained, so deferred callbacks report after all synchronous output.

    Args:
        config: Lesson inputs (default: DemoConfig())
        fixtures: Shared inputs (default: Fixtures.create(Display()))
        pause: Called between lessons, e.g. to wait for Enter

    Returns:
        The fixtures, holding every booking, airline and poll touched.
    """
    config = config or DemoConfig()
    fixtures = fixtures or Fixtures.create(Display(), realtime=config.realtime_timers)
    show = fixtures.display

    for number, (title, lesson) in enumerate(LESSONS, start=1):
        show("=" * 70)
        show(f"LESSON {number}: {title}")
        show("=" * 70)
        lesson(fixtures, config)
        if pause is not None:
            pause()

    section_header(show, "Simulated click")
    fixtures.page.dispatch("click")
    section_header(show, "Timers")
    fixtures.timers.run_until_idle()
    return fixtures
