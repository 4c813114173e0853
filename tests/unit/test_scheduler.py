"""
test_scheduler.py - Unit Tests for the Timer Queue and Event Target

Tests cover:
1. Timer ordering
2. TimerQueue scheduling, advancing and draining
3. Delay validation
4. EventTarget registration and dispatch
"""

import math

import pytest

from airline_functions import EventTarget, InvalidDelay, Timer, TimerQueue


def _noop():
    pass


class TestTimer:
    """Tests for Timer ordering."""

    def test_ordering_by_due_time(self):
        assert Timer(10, 5, _noop) < Timer(20, 0, _noop)

    def test_ordering_by_sequence_on_tie(self):
        assert Timer(10, 0, _noop) < Timer(10, 1, _noop)


class TestTimerQueue:
    """Tests for TimerQueue."""

    def test_schedule_does_not_run(self, timers):
        fired = []
        timers.schedule(lambda: fired.append("a"), 100)

        assert fired == []
        assert timers.pending_count() == 1

    def test_schedule_returns_increasing_ids(self, timers):
        first = timers.schedule(_noop, 10)
        second = timers.schedule(_noop, 10)
        assert second > first

    def test_advance_runs_only_due_timers(self, timers):
        fired = []
        timers.schedule(lambda: fired.append("early"), 100)
        timers.schedule(lambda: fired.append("late"), 500)

        assert timers.advance(99) == 0
        assert timers.advance(1) == 1
        assert fired == ["early"]
        assert timers.now_ms == 100
        assert timers.pending_count() == 1

    def test_run_until_idle_in_delay_order(self, timers):
        fired = []
        timers.schedule(lambda: fired.append(300), 300)
        timers.schedule(lambda: fired.append(100), 100)
        timers.schedule(lambda: fired.append(200), 200)

        assert timers.run_until_idle() == 3
        assert fired == [100, 200, 300]
        assert timers.now_ms == 300

    def test_equal_delays_fire_in_scheduling_order(self, timers):
        fired = []
        for name in "abc":
            timers.schedule(lambda name=name: fired.append(name), 50)
        timers.run_until_idle()
        assert fired == ["a", "b", "c"]

    def test_fires_at_most_once(self, timers):
        fired = []
        timers.schedule(lambda: fired.append(1), 10)
        timers.run_until_idle()
        timers.run_until_idle()
        timers.advance(1000)
        assert fired == [1]

    def test_fires_no_earlier_than_delay(self, timers):
        seen = []
        timers.advance(40)
        timers.schedule(lambda: seen.append(timers.now_ms), 60)
        timers.run_until_idle()
        assert seen == [100]

    def test_callback_can_schedule_more(self, timers):
        fired = []

        def first():
            fired.append("first")
            timers.schedule(lambda: fired.append("second"), 10)

        timers.schedule(first, 10)
        timers.advance(20)
        assert fired == ["first", "second"]

    def test_callback_exception_propagates(self, timers):
        def boom():
            raise RuntimeError("boom")

        timers.schedule(boom, 0)
        with pytest.raises(RuntimeError, match="boom"):
            timers.run_until_idle()

    @pytest.mark.parametrize("delay", [-1, math.nan, math.inf])
    def test_invalid_delay_rejected(self, timers, delay):
        with pytest.raises(InvalidDelay):
            timers.schedule(_noop, delay)

    @pytest.mark.parametrize("window", [-5000, math.nan, math.inf])
    def test_invalid_advance_rejected(self, timers, window):
        """A bad window leaves the clock where it was and timers still fire."""
        fired = []
        with pytest.raises(InvalidDelay):
            timers.advance(window)
        assert timers.now_ms == 0

        timers.schedule(lambda: fired.append(1), 0)
        assert timers.run_until_idle() == 1
        assert fired == [1]

    def test_peek_next(self, timers):
        assert timers.peek_next() is None
        timers.schedule(_noop, 200)
        timers.schedule(_noop, 100)
        assert timers.peek_next().due_ms == 100

    def test_realtime_sleeps_through_gap(self, monkeypatch):
        slept = []
        monkeypatch.setattr("airline_functions.scheduler.time.sleep", slept.append)
        timers = TimerQueue(realtime=True)
        timers.schedule(_noop, 1500)
        timers.run_until_idle()
        assert slept == [1.5]


class TestEventTarget:
    """Tests for EventTarget."""

    def test_dispatch_runs_listeners_in_order(self, page):
        fired = []
        page.add_event_listener("click", lambda: fired.append(1))
        page.add_event_listener("click", lambda: fired.append(2))

        assert page.dispatch("click") == 2
        assert fired == [1, 2]

    def test_dispatch_without_listeners_is_noop(self, page):
        assert page.dispatch("click") == 0

    def test_events_are_separate(self, page):
        fired = []
        page.add_event_listener("keydown", lambda: fired.append("key"))
        page.dispatch("click")
        assert fired == []
        assert page.listener_count("keydown") == 1

    def test_dispatch_repeatedly(self, page):
        fired = []
        page.add_event_listener("click", lambda: fired.append(1))
        page.dispatch("click")
        page.dispatch("click")
        assert fired == [1, 1]
