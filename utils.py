import pandas as pd
from typing import Iterable
from domain import Totals, WorkEntry
from services import format_hours, time_of

ENTRY_COLUMNS = ["ID", "Date", "Start Time", "End Time", "Break Hours", "Hours Worked", "Quarter Hours Worked"]


def entries_to_dataframe(entries: Iterable[WorkEntry]) -> pd.DataFrame:
    rows = []
    for e in entries:
        rows.append({
            "ID": e.id,
            "Date": e.date,
            "Start Time": e.start_time,
            "End Time": e.end_time,
            "Break Hours": e.break_duration,
            "Hours Worked": format_hours(e.hours_worked),
            "Quarter Hours Worked": e.quarter_hours_worked,
        })
    # insertion order is display order, no sorting
    return pd.DataFrame(rows, columns=ENTRY_COLUMNS)


def totals_for_display(totals: Totals) -> dict[str, str]:
    return {
        "Total Hours Worked": format_hours(totals.total_hours_worked),
        "Total Quarter Hours": str(round(totals.total_quarter_hours_worked)),
        "Total Pause Time": time_of(totals.total_pause_time),
    }
