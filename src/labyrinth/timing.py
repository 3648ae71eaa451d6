# src/labyrinth/timing.py
"""
Wall-clock helpers for the non-deterministic seed fallback.

A missing seed resolves to the current time in milliseconds since the epoch
(the browser's Date.now()). Callers that need determinism pass a seed; tests
pass one of the providers below instead of the real clock.
"""

import time
from typing import Callable

Clock = Callable[[], int]

def now_ms() -> int:
    """Milliseconds since the Unix epoch, as an int."""
    return time.time_ns() // 1_000_000

def make_fixed_clock(value: int) -> Clock:
    """Clock that always reports `value`."""
    def clock() -> int:
        return value
    return clock

def make_linear_clock(start: int = 0, step: int = 1) -> Clock:
    """
    Deterministic clock for tests:
      returns start, start+step, start+2*step, ...
    i.e., advances by `step` ms per reading.
    """
    state = {"t": start - step}
    def clock() -> int:
        state["t"] += step
        return state["t"]
    return clock
