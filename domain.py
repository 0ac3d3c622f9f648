from __future__ import annotations
from dataclasses import dataclass, field

from services import hours_between, minutes_of, quarter_hours


@dataclass
class EntryDraft:
    """Raw form input for a work entry, before the store assigns an id."""
    date: str
    start_time: str
    end_time: str
    break_duration: str = ""

    def normalized(self) -> "EntryDraft":
        """Strips the fields and validates the times. A blank break means no break."""
        draft = EntryDraft(
            date=self.date.strip(),
            start_time=self.start_time.strip(),
            end_time=self.end_time.strip(),
            break_duration=self.break_duration.strip() or "00:00",
        )
        for value in (draft.start_time, draft.end_time, draft.break_duration):
            minutes_of(value)
        return draft


@dataclass
class WorkEntry:
    """Represents a single recorded work session."""
    id: int
    date: str
    start_time: str
    end_time: str
    break_duration: str = "00:00"
    wrap_overnight: bool = field(default=False, repr=False, compare=False)

    @property
    def hours_worked(self) -> float:
        return hours_between(
            self.start_time, self.end_time, self.break_duration,
            wrap_overnight=self.wrap_overnight,
        )

    @property
    def quarter_hours_worked(self) -> int:
        return quarter_hours(self.hours_worked)

    @property
    def break_minutes(self) -> int:
        return minutes_of(self.break_duration)


@dataclass(frozen=True)
class Totals:
    total_hours_worked: float = 0.0
    total_quarter_hours_worked: int = 0
    total_pause_time: int = 0  # minutes
