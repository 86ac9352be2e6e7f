"""Wall-clock arithmetic on "HH:MM" strings."""

import math

MINUTES_PER_DAY = 24 * 60


def to_minutes(clock: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    hours, minutes = clock.split(":")
    return int(hours) * 60 + int(minutes)


def from_minutes(total: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM", wrapping at 24h."""
    total %= MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def duration_to_minutes(duration_hours: float) -> int:
    """Convert fractional hours to whole minutes, rounding half up."""
    return math.floor(duration_hours * 60 + 0.5)


def compute_end_time(start: str, duration_hours: float) -> str:
    """Add a duration to a start time.

    The result wraps at midnight; no day rollover is tracked, so a 22:00
    departure lasting 4 hours ends at "02:00".

    Args:
        start: Departure time "HH:MM"
        duration_hours: Duration in hours, fractional allowed

    Returns:
        End time "HH:MM"
    """
    return from_minutes(to_minutes(start) + duration_to_minutes(duration_hours))


def minutes_between(end: str, next_start: str) -> int:
    """Signed minutes from one clock time to a later one on the same day."""
    return to_minutes(next_start) - to_minutes(end)


def wraps_midnight(start: str, end: str) -> bool:
    """True if an interval ending at `end` crossed midnight after `start`."""
    return to_minutes(end) < to_minutes(start)
