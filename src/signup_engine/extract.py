# signup_engine/extract.py
from __future__ import annotations

import pandas as pd

from signup_engine.schedule import Schedule

ASSIGNMENT_COLUMNS = ["date", "position", "name", "email"]
WAITLIST_COLUMNS = ["name", "email", "dates_available"]
SLOT_COLUMNS = ["date", "signups", "assigned", "open_seats", "scarcity_rank"]


def extract_assignments(schedule: Schedule) -> pd.DataFrame:
    """Return one row per (date, seat) in calendar order."""
    rows = schedule.assignment_rows()
    if not rows:
        return pd.DataFrame(columns=ASSIGNMENT_COLUMNS)
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)


def extract_waitlist(schedule: Schedule) -> pd.DataFrame:
    """Return the waitlist in pool order with dates rendered as "M/D, M/D"."""
    rows = schedule.waitlist_rows()
    if not rows:
        return pd.DataFrame(columns=WAITLIST_COLUMNS)
    return pd.DataFrame(rows, columns=WAITLIST_COLUMNS)


def extract_slots(schedule: Schedule) -> pd.DataFrame:
    """Return per-date totals; scarcity_rank is the 1-based processing position."""
    rank = {d: i + 1 for i, d in enumerate(schedule.scarcity_order)}
    rows = [
        {
            "date": s.date,
            "signups": s.signup_count,
            "assigned": s.filled(),
            "open_seats": s.open_seats(schedule.capacity),
            "scarcity_rank": rank.get(s.date, 0),
        }
        for s in schedule.slots
    ]
    if not rows:
        return pd.DataFrame(columns=SLOT_COLUMNS)
    return pd.DataFrame(rows, columns=SLOT_COLUMNS)
