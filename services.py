from __future__ import annotations
import math
import re

_HHMM = re.compile(r"^(\d+):([0-5]\d)$")
MINUTES_PER_DAY = 24 * 60


class InvalidTimeError(ValueError):
    """Raised when a field is not an HH:MM time or duration."""


def minutes_of(value: str) -> int:
    """'HH:MM' -> minutes since midnight (or minutes of a duration)."""
    match = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidTimeError(f"Expected HH:MM, got {value!r}")
    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def time_of(minutes: int) -> str:
    """Minutes -> 'HH:MM'. No wrap past 24h, 1500 gives '25:00'."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def hours_between(start: str, end: str, break_duration: str = "00:00",
                  wrap_overnight: bool = False) -> float:
    """
    Worked hours between two clock times minus the break.
    An end before the start clamps to 0 unless wrap_overnight is set,
    in which case the end falls on the next day.
    """
    elapsed = minutes_of(end) - minutes_of(start)
    if wrap_overnight and elapsed < 0:
        elapsed += MINUTES_PER_DAY  # passed midnight
    elapsed -= minutes_of(break_duration)
    return max(0.0, elapsed / 60.0)


def quarter_hours(hours: float) -> int:
    """Rounds up to whole quarter hours: 1.01 h -> 5."""
    return math.ceil(hours * 4)


def format_hours(hours: float) -> str:
    return time_of(round(hours * 60))
