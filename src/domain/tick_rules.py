"""Tick rules that are independent from the scheduler and the console.

Rule of thumb:
- OK: constants, interval conversions, tick counting.
- Not OK: printing, touching the scheduler, datetime.now(), etc.
"""

RUNNING_MESSAGE = "running..."
LOOP_MESSAGE = "loop"

DEFAULT_INTERVAL_MS = 1000


def interval_seconds(interval_ms: int) -> float:
    """Return the timer period in seconds for the given millisecond interval."""
    if interval_ms <= 0:
        raise ValueError("interval_ms must be greater than 0")
    return interval_ms / 1000


def expected_tick_count(elapsed_ms: float, interval_ms: int) -> int:
    """Number of ticks a fixed-rate timer fires within an observation window.

    The first tick fires one full interval after the timer is scheduled,
    so a window shorter than one interval sees no tick.

    Args:
        elapsed_ms: Length of the observation window, measured from scheduling.
        interval_ms: Timer period.

    Returns:
        floor(elapsed_ms / interval_ms)
    """
    if interval_ms <= 0:
        raise ValueError("interval_ms must be greater than 0")
    if elapsed_ms < 0:
        raise ValueError("elapsed_ms must not be negative")
    return int(elapsed_ms // interval_ms)
