#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: How Functions Work

A guided walk through the lessons in airline_functions. Each lesson prints
what it does, runs, and ends with a key insight. Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2:   Arguments   - Default parameters, value vs. reference
  3-5:   Functions   - Callbacks, higher-order dispatch, returned functions
  6-7:   Receivers   - call/apply/bind and partial application
  8-10:  Closures    - Immediately-invoked blocks, closures, timers
  11:    Poll        - Tallying answers, borrowing a display method

Run:
    python demo.py           # Interactive mode (press Enter, type poll answers)
    python demo.py --quick   # Run all lessons without pausing, scripted answers
"""

import sys

from airline_functions import Display, DemoConfig, Fixtures, LESSONS


CONFIG = DemoConfig()

# Global state for interactive mode
QUICK_MODE = "--quick" in sys.argv


KEY_INSIGHTS = {
    1: """
    None marks a missing argument. Passing None for a middle argument skips
    it: its default is applied and the next argument still binds by position.
    ``or`` replaces every falsy value, so a passenger count of 0 becomes 1.
    """,
    2: """
    Python passes references by value. Rebinding a parameter changes only
    the local name; mutating the object changes it for the caller too.
    Copy a record before experimenting on it.
    """,
    3: """
    transformer() does not care HOW text is transformed. Any str -> str
    function can be passed in and it will be called back.
    """,
    4: """
    The food label travels with the callback as an explicit tag. Relying on
    a function's name to decide behaviour breaks as soon as it is renamed.
    """,
    5: """
    A returned function remembers the argument of the call that made it.
    greet("Hello")("Sarah") calls both functions back to back.
    """,
    6: """
    lufthansa.book(...) supplies the receiver implicitly. Airline.book(eurowings, ...)
    supplies it explicitly. bind(...) fixes the receiver and leading arguments
    once and can be called again and again.
    """,
    7: """
    Binding a receiver and fixing leading arguments are separate things:
    bind(add_tax, None, 0.23) fixes the rate without any receiver.
    """,
    8: """
    An immediately-invoked block runs once. Its state is private; only what
    it returns escapes.
    """,
    9: """
    Each booker owns its own counter. Reassigning the slot makes the old
    closure, and what it captured, unreachable.
    """,
    10: """
    The boarding callback runs after everything synchronous has finished,
    yet it still sees n and per_group from its long-gone caller.
    """,
    11: """
    Invalid answers are ignored silently. display_results only needs an
    ``answers`` field, so it can show any poll-shaped record.
    """,
}


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    """Print a section header within a step."""
    print(f"\n--- {text} ---\n")


def main():
    """Run the complete tutorial."""
    print("=" * 70)
    print("       AIRLINE FUNCTIONS - INTERACTIVE TUTORIAL")
    print("=" * 70)

    if QUICK_MODE:
        print("Running in QUICK mode (no pauses)")
    else:
        print("Running in INTERACTIVE mode (press Enter to advance)")

    wait_for_enter()

    display = Display(verbose=True, record=False)
    fixtures = Fixtures.create(
        display,
        input_source=None if QUICK_MODE else input,
        realtime=not QUICK_MODE,
    )

    for number, (title, lesson) in enumerate(LESSONS, start=1):
        step_header(number, title, lesson.__doc__)
        lesson(fixtures, CONFIG)
        section_header("Key Insight")
        print(KEY_INSIGHTS[number])
        wait_for_enter()

    section_header("Clicking the page")
    clicked = fixtures.page.dispatch("click")
    print(f"({clicked} listeners ran)")

    section_header("Waiting for timers")
    fixtures.timers.run_until_idle()

    print(f"\n{'='*70}")
    print("TUTORIAL COMPLETE")
    print(f"{'='*70}")
    print("""
    Next steps:
      - See airline_functions/*.py for each lesson's building blocks
      - Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()
