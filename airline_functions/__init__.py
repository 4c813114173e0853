"""
airline_functions - Lessons in How Functions Work

Default parameters, argument passing, callbacks, explicit receivers,
immediately-invoked blocks and closures, told through airline bookings and
a poll.

Usage:
    from airline_functions import Airline, Display, bind, secure_booking

    display = Display()
    eurowings = Airline("Eurowings", "EW", display=display)
    book_ew23 = bind(Airline.book, eurowings, 23)
    book_ew23("Jonas Schmedtmann")

    booker = secure_booking(display)
    booker()   # 1 passengers
    booker()   # 2 passengers
"""

# Core types
from .core import (
    Booking,
    BookingLog,
    Passenger,
    AirlineBooking,
    AnswerHolder,
    CheckInResult,
    InputSource,
    AirlineFunctionsError,
    InvalidPollDefinition,
    InvalidDelay,
    APPROVED_PASSPORTS,
    MICHAEL,
    SARAH,
    ARCTURUS,
    GENDER_MALE,
    GENDER_FEMALE,
    FOOD_PIZZA,
    FOOD_MIKANS,
    RESULTS_ARRAY,
    RESULTS_STRING,
)

# Display
from .display import Display, CONSOLE

# Default parameters
from .bookings import (
    create_booking,
    create_booking_coalesce,
    create_booking_defaults,
    create_booking_computed,
    default_price,
)

# Check-in and argument passing
from .passengers import (
    check_in,
    display_name,
    change_value,
    change_complex,
    passenger_record,
)

# Callbacks
from .callbacks import (
    one_word,
    upper_first_word,
    transformer,
    eat,
    eat_pizza,
    eat_mikan,
    high5,
    greet_each,
    spell_out,
)

# Returned functions
from .factories import greet, greet_arrow, tax_adder, add_tax

# Receivers
from .receivers import Airline, call, apply, bind

# Scheduling
from .scheduler import Timer, TimerQueue, EventTarget

# Closures
from .closures import (
    invoke,
    Header,
    install_header,
    private_counter_block,
    secure_booking,
    captured_values,
    FunctionSlot,
    assign_g,
    assign_h,
    board_passengers,
)

# Poll
from .poll import Poll, parse_answer, display_results, vote_shares

# Runner
from .runner import DemoConfig, Fixtures, LESSONS, run_all

__all__ = [
    # Core
    'Booking', 'BookingLog', 'Passenger', 'AirlineBooking', 'AnswerHolder',
    'CheckInResult', 'InputSource',
    'AirlineFunctionsError', 'InvalidPollDefinition', 'InvalidDelay',
    'APPROVED_PASSPORTS', 'MICHAEL', 'SARAH', 'ARCTURUS',
    'GENDER_MALE', 'GENDER_FEMALE', 'FOOD_PIZZA', 'FOOD_MIKANS',
    'RESULTS_ARRAY', 'RESULTS_STRING',
    # Display
    'Display', 'CONSOLE',
    # Default parameters
    'create_booking', 'create_booking_coalesce', 'create_booking_defaults',
    'create_booking_computed', 'default_price',
    # Check-in
    'check_in', 'display_name', 'change_value', 'change_complex', 'passenger_record',
    # Callbacks
    'one_word', 'upper_first_word', 'transformer',
    'eat', 'eat_pizza', 'eat_mikan', 'high5', 'greet_each', 'spell_out',
    # Returned functions
    'greet', 'greet_arrow', 'tax_adder', 'add_tax',
    # Receivers
    'Airline', 'call', 'apply', 'bind',
    # Scheduling
    'Timer', 'TimerQueue', 'EventTarget',
    # Closures
    'invoke', 'Header', 'install_header', 'private_counter_block',
    'secure_booking', 'captured_values', 'FunctionSlot', 'assign_g', 'assign_h',
    'board_passengers',
    # Poll
    'Poll', 'parse_answer', 'display_results', 'vote_shares',
    # Runner
    'DemoConfig', 'Fixtures', 'LESSONS', 'run_all',
]

__version__ = '1.0.0'
