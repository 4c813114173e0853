"""
poll.py - Poll Tally

A Poll holds a question, its options and one integer counter per option.
Answers are 1-based option numbers typed by the user. Anything that is not
a whole number in range is ignored without an error.

display_results() only needs an ``answers`` attribute, so it can show the
results of any record shaped like a poll:

    display_results(SimpleNamespace(answers=[5, 2, 3]), "string")
    # Poll results are 5, 2, 3
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .core import (
    AnswerHolder, InputSource, InvalidPollDefinition,
    RESULTS_ARRAY, RESULTS_STRING,
)
from .display import Display, CONSOLE


def parse_answer(raw: Any) -> float:
    """
    Convert raw user input to a number.

    Numeric text (surrounding whitespace allowed) becomes a float. Blank
    text, None and anything non-numeric become NaN. Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return float("nan")
    if isinstance(raw, (int, float)):
        value = raw
    else:
        value = str(raw).strip()
        if not value:
            return float("nan")
    try:
        return float(value)
    except (ValueError, OverflowError):
        return float("nan")


def display_results(
    holder: AnswerHolder,
    mode: str = RESULTS_ARRAY,
    display: Optional[Display] = None,
) -> None:
    """
    Show the answer counters of any poll-shaped record.

    Args:
        holder: Object with an ``answers`` sequence of integers
        mode: RESULTS_ARRAY for the raw list, RESULTS_STRING for a summary line
        display: Where to show the results

    Unknown modes show nothing.
    """
    display = display if display is not None else CONSOLE
    counts = [int(count) for count in np.asarray(holder.answers).tolist()]
    if mode == RESULTS_ARRAY:
        display(counts)
    elif mode == RESULTS_STRING:
        display(f"Poll results are {', '.join(str(count) for count in counts)}")


def vote_shares(holder: AnswerHolder) -> np.ndarray:
    """Each option's share of all votes; all zeros when nobody has voted."""
    answers = np.asarray(holder.answers, dtype=np.float64)
    total = answers.sum()
    if total == 0:
        return np.zeros_like(answers)
    return answers / total


@dataclass(eq=False)
class Poll:
    """
    Question with numbered options and a vote counter per option.

    Attributes:
        question: Text shown above the options
        options: Option labels, in display order
        answers: int64 counters, same length as options, never negative
        display: Where results are shown after each accepted answer

    Use Poll.create() to build one with zeroed counters.
    """
    question: str
    options: Tuple[str, ...]
    answers: np.ndarray
    display: Optional[Display] = None

    def __post_init__(self):
        if not self.question or not self.question.strip():
            raise InvalidPollDefinition("Poll question cannot be empty")
        if not self.options:
            raise InvalidPollDefinition("Poll needs at least one option")
        if len(self.answers) != len(self.options):
            raise InvalidPollDefinition(
                f"Poll has {len(self.options)} options but {len(self.answers)} counters"
            )
        if (np.asarray(self.answers) < 0).any():
            raise InvalidPollDefinition("Poll counters cannot be negative")

    @classmethod
    def create(
        cls,
        question: str,
        options: Sequence[str],
        display: Optional[Display] = None,
    ) -> 'Poll':
        """Create a poll with every counter at zero."""
        options = tuple(options)
        return cls(question, options, np.zeros(len(options), dtype=np.int64), display)

    @property
    def total_votes(self) -> int:
        return int(self.answers.sum())

    def prompt(self) -> str:
        """Question followed by one option per line."""
        return "\n".join([self.question, *self.options, "(Write option number)"])

    def answer(self, value: Any) -> bool:
        """
        Record one answer.

        Args:
            value: Raw text or number; a whole number 1..N selects option N

        Returns:
            True if the answer was counted (results are then shown as an
            array), False if it was ignored.
        """
        number = parse_answer(value)
        if not number.is_integer() or not 1 <= number <= len(self.options):
            return False
        self.answers[int(number) - 1] += 1
        self.display_results()
        return True

    def register_new_answer(self, input_source: InputSource = input) -> bool:
        """Prompt once for an answer and record it."""
        return self.answer(input_source(self.prompt()))

    def display_results(self, mode: str = RESULTS_ARRAY) -> None:
        display_results(self, mode, self.display)
