"""
Tests for callbacks.py - Higher-Order Functions and Callbacks
"""

import pytest

from airline_functions import (
    FOOD_PIZZA, FOOD_MIKANS,
    one_word, upper_first_word, transformer,
    eat, eat_pizza, eat_mikan,
    high5, greet_each, spell_out,
)


class TestTransformers:

    def test_one_word(self):
        assert one_word("Hello my Baby") == "hellomybaby"

    def test_one_word_without_spaces(self):
        assert one_word("ABC") == "abc"

    def test_upper_first_word(self):
        assert upper_first_word("Hello my cheeky chango") == "HELLO my cheeky chango"

    def test_upper_first_word_keeps_remainder(self):
        """Everything after the first space is untouched, extra spaces included."""
        assert upper_first_word("ab  cd Ef") == "AB  cd Ef"

    def test_upper_first_word_single_word(self):
        assert upper_first_word("hello") == "HELLO"


class TestTransformer:
    """Tests for transformer()."""

    def test_returns_transformed_text(self, display):
        assert transformer("Hello my cheeky chango", one_word, display) == "hellomycheekychango"

    def test_reports_callback_name(self, display):
        transformer("Hello my cheeky chango", upper_first_word, display)
        assert display.lines == [
            "Original string: Hello my cheeky chango",
            "Using 'upper_first_word' to transform.",
            "Transformed string: HELLO my cheeky chango",
        ]

    def test_accepts_any_callable(self, display):
        def shout(text):
            return text.upper() + "!"

        assert transformer("hi", shout, display) == "HI!"
        assert display.contains("Using 'shout' to transform.")


class TestEat:
    """Tests for eat() dispatch on explicit food tags."""

    def test_pizza(self, display):
        eat(eat_pizza, 3, FOOD_PIZZA, display)
        assert display.lines == [
            "Processing pizza using eat_pizza, with 3 pieces.",
            "You eat a slice of pizza, yum!",
            "You eat a slice of pizza, yum!",
            "You eat a slice of pizza, yum!",
            "You ate all 3 slices of pizza!",
        ]

    def test_mikans(self, display):
        eat(eat_mikan, 2, FOOD_MIKANS, display)
        assert display.lines[0] == "Processing mikans using eat_mikan, with 2 pieces."
        assert display.lines.count("You scoff a mikan.") == 2
        assert display.lines[-1] == "You ate 2 mikans!"

    def test_label_follows_tag_not_callback_name(self, display):
        """The tag decides the label even when it disagrees with the callback."""
        eat(eat_pizza, 1, FOOD_MIKANS, display)
        assert display.lines[0] == "Processing mikans using eat_pizza, with 1 pieces."

    def test_unknown_tag_is_silent(self, display):
        eat(eat_mikan, 1, "durian", display)
        assert display.lines[0] == "Processing  using eat_mikan, with 1 pieces."
        assert display.lines[-1] == "You ate 1 mikans!"

    def test_zero_pieces(self, display):
        eat_pizza(0, display)
        assert display.lines == ["You ate all 0 slices of pizza!"]

    def test_pizza_default(self, display):
        eat_pizza(display=display)
        assert display.lines[-1] == "You ate all 6 slices of pizza!"

    def test_mikan_default(self, display):
        eat_mikan(display=display)
        assert display.lines[-1] == "You ate 2 mikans!"


class TestIterationCallbacks:

    def test_greet_each_calls_back_per_name(self, display):
        count = greet_each(["James", "Sarah"], high5, display)

        assert count == 2
        assert display.lines[1] == "James"
        assert display.lines[3] == "Sarah"
        assert display.lines[0] == display.lines[2]

    def test_greet_each_empty(self, display):
        assert greet_each([], high5, display) == 0
        assert display.lines == []

    def test_spell_out(self, display):
        spell_out("Mike", display)
        assert display.lines == ["M", "i", "k", "e"]
