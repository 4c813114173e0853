"""
scheduler.py - Timer Queue and Event Target

Single-threaded, cooperative scheduling:
- Timers are just data, callbacks are just functions
- A heap orders timers by due time, then by scheduling order
- Callbacks run to completion; nothing is preempted or cancelled

Core concepts:
1. Timer: Immutable record of what runs and no earlier than when
2. TimerQueue: Virtual-clock timer service, schedule(callback, delay_ms)
3. EventTarget: Named trigger events ("click") dispatched to listeners
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import heapq
import math
import time

from .core import Callback, InvalidDelay


# ============================================================================
# TIMER DATA STRUCTURE
# ============================================================================

@dataclass(frozen=True, slots=True)
class Timer:
    """
    Scheduled callback.

    Sorting: by due time, then sequence (scheduling order).

    Attributes:
        due_ms: Virtual time at or after which the callback may run
        sequence: Monotonic scheduling counter, doubles as the timer id
        callback: Zero-argument function to run
    """
    due_ms: float
    sequence: int
    callback: Callback = field(compare=False)

    def __lt__(self, other: 'Timer') -> bool:
        """Enable heap ordering: due time, then scheduling order."""
        if self.due_ms != other.due_ms:
            return self.due_ms < other.due_ms
        return self.sequence < other.sequence


# ============================================================================
# TIMER QUEUE
# ============================================================================

class TimerQueue:
    """
    Virtual-clock timer service.

    Design:
    - schedule() never runs anything; callbacks only run from advance()
      or run_until_idle(), after the scheduling code has returned
    - Each timer fires at most once, no earlier than its delay
    - Exceptions from callbacks propagate unchanged
    """

    def __init__(self, realtime: bool = False):
        """
        Create a timer queue.

        Args:
            realtime: Sleep through the virtual gap before each callback
                      (default: False, which runs due timers immediately)
        """
        self._heap: List[Timer] = []
        self._next_sequence: int = 0
        self._now_ms: float = 0.0
        self.realtime = realtime

    @property
    def now_ms(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now_ms

    def schedule(self, callback: Callback, delay_ms: float = 0) -> int:
        """
        Queue ``callback`` to run no earlier than ``delay_ms`` from now.

        Returns the timer id.

        Raises:
            InvalidDelay: If the delay is negative, NaN or infinite.
        """
        if not math.isfinite(delay_ms) or delay_ms < 0:
            raise InvalidDelay(f"Timer delay must be a finite, non-negative number, got {delay_ms}")
        timer = Timer(self._now_ms + delay_ms, self._next_sequence, callback)
        self._next_sequence += 1
        heapq.heappush(self._heap, timer)
        return timer.sequence

    def _run_due(self, until_ms: float) -> int:
        ran = 0
        while self._heap and self._heap[0].due_ms <= until_ms:
            timer = heapq.heappop(self._heap)
            if self.realtime and timer.due_ms > self._now_ms:
                time.sleep((timer.due_ms - self._now_ms) / 1000)
            self._now_ms = max(self._now_ms, timer.due_ms)
            timer.callback()
            ran += 1
        return ran

    def advance(self, ms: float) -> int:
        """
        Move the clock forward by ``ms`` and run every timer due in that window.

        Timers scheduled by callbacks run in the same call if they fall due.
        Returns the number of callbacks run.

        Raises:
            InvalidDelay: If the window is negative, NaN or infinite.
        """
        if not math.isfinite(ms) or ms < 0:
            raise InvalidDelay(f"Clock can only advance by a finite, non-negative amount, got {ms}")
        target = self._now_ms + ms
        ran = self._run_due(target)
        self._now_ms = target
        return ran

    def run_until_idle(self) -> int:
        """Run timers in due order until the queue is empty. Returns the count run."""
        return self._run_due(math.inf)

    def pending_count(self) -> int:
        """Number of timers waiting to fire."""
        return len(self._heap)

    def peek_next(self) -> Optional[Timer]:
        """Next timer to fire, without removing it."""
        return self._heap[0] if self._heap else None


# ============================================================================
# EVENT TARGET
# ============================================================================

class EventTarget:
    """
    Source of named trigger events such as "click".

    Listeners receive no payload and run in registration order. Dispatching
    an event nobody listens to does nothing.
    """

    def __init__(self, name: str = "page"):
        self.name = name
        self._listeners: Dict[str, List[Callback]] = defaultdict(list)

    def add_event_listener(self, event: str, callback: Callback) -> None:
        """Register a listener for an event type."""
        self._listeners[event].append(callback)

    def dispatch(self, event: str) -> int:
        """Fire an event. Returns how many listeners ran."""
        listeners = list(self._listeners.get(event, ()))
        for callback in listeners:
            callback()
        return len(listeners)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))
