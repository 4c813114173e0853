"""
callbacks.py - Higher-Order Functions and Callbacks

Functions are ordinary values: they can be stored, passed to other
functions and called later by whoever receives them.

Transformers:
    one_word()          - strip spaces, lowercase
    upper_first_word()  - uppercase the first word only
    transformer()       - higher-order: applies any transformer, reports its name

Dispatch:
    eat()               - higher-order: labels food by an explicit tag, then calls back
    eat_pizza(), eat_mikan()

Iteration callbacks:
    high5(), greet_each(), spell_out()
"""

from __future__ import annotations
from typing import Callable, Iterable, Optional

from .core import FOOD_PIZZA, FOOD_MIKANS
from .display import Display, CONSOLE


# Callback signature for eat(): (pieces, display) -> None
EatCallback = Callable[[int, Optional[Display]], None]

_FOOD_LABELS = {
    FOOD_PIZZA: "pizza",
    FOOD_MIKANS: "mikans",
}


# ============================================================================
# TRANSFORMERS
# ============================================================================

def one_word(text: str) -> str:
    return text.replace(" ", "").lower()


def upper_first_word(text: str) -> str:
    """Uppercase the first word; text without a space is uppercased whole."""
    first, space, rest = text.partition(" ")
    return first.upper() + space + rest


def transformer(
    text: str,
    fn: Callable[[str], str],
    display: Optional[Display] = None,
) -> str:
    """
    Transform text with a callback and report which callback was used.

    transformer() does not care how the text is transformed; any
    str -> str function works.
    """
    display = display if display is not None else CONSOLE
    display(f"Original string: {text}")
    display(f"Using '{fn.__name__}' to transform.")
    display(f"Transformed string: {fn(text)}")
    return fn(text)


# ============================================================================
# CALLBACK DISPATCH
# ============================================================================

def eat(
    fn: EatCallback,
    pieces: int,
    food: Optional[str] = None,
    display: Optional[Display] = None,
) -> None:
    """
    Announce a meal, then hand the pieces to the eating callback.

    The food label comes from the ``food`` tag passed with the callback.
    An unknown tag leaves the label empty.
    """
    display = display if display is not None else CONSOLE
    label = _FOOD_LABELS.get(food, "")
    display(f"Processing {label} using {fn.__name__}, with {pieces} pieces.")
    fn(pieces, display)


def eat_pizza(slices: int = 6, display: Optional[Display] = None) -> None:
    display = display if display is not None else CONSOLE
    for _ in range(slices):
        display("You eat a slice of pizza, yum!")
    display(f"You ate all {slices} slices of pizza!")


def eat_mikan(mikans: int = 2, display: Optional[Display] = None) -> None:
    display = display if display is not None else CONSOLE
    for _ in range(mikans):
        display("You scoff a mikan.")
    display(f"You ate {mikans} mikans!")


# ============================================================================
# ITERATION CALLBACKS
# ============================================================================

def high5(display: Optional[Display] = None) -> None:
    display = display if display is not None else CONSOLE
    display("\N{RAISED HAND WITH FINGERS SPLAYED}")


def greet_each(
    names: Iterable[str],
    callback: Callable[[Optional[Display]], None],
    display: Optional[Display] = None,
) -> int:
    """Call ``callback`` once per name, then show the name. Returns the count."""
    display = display if display is not None else CONSOLE
    count = 0
    for name in names:
        callback(display)
        display(name)
        count += 1
    return count


def spell_out(text: str, display: Optional[Display] = None) -> None:
    """Show each character of ``text`` on its own line."""
    display = display if display is not None else CONSOLE
    for char in text:
        display(char)
