from __future__ import annotations

from collections import Counter

import pandas as pd

from signup_engine.result_types import AllocationResult

from .data_models import AllocationMetrics


def compute_allocation_metrics(res: AllocationResult) -> AllocationMetrics:
    """Summarise seats filled vs offered and people placed vs waitlisted."""
    sched = res.schedule
    assigned = len(sched.assigned_people())
    waitlisted = len(sched.waitlist)
    people = assigned + waitlisted
    seats_offered = sched.seats_offered()
    filled = [s.filled() for s in sched.slots]

    return AllocationMetrics(
        people=people,
        assigned=assigned,
        waitlisted=waitlisted,
        dates=len(sched.slots),
        capacity=sched.capacity,
        seats_offered=seats_offered,
        seats_filled=sum(filled),
        empty_dates=sum(1 for f in filled if f == 0),
        full_dates=sum(1 for f in filled if f >= sched.capacity),
        fill_rate=sum(filled) / seats_offered if seats_offered else 0.0,
        placement_rate=assigned / people if people else 0.0,
        duplicate_emails=len(res.duplicates),
    )


def compute_date_summary(res: AllocationResult) -> pd.DataFrame:
    """Per-date table in calendar order with a demand ratio (signups / capacity)."""
    df = res.df_slots.copy()
    if df.empty:
        return pd.DataFrame(
            columns=[
                "date",
                "signups",
                "assigned",
                "open_seats",
                "scarcity_rank",
                "demand_ratio",
            ]
        )
    df["demand_ratio"] = df["signups"] / float(res.schedule.capacity)
    return df


def dates_listed_by_outcome(res: AllocationResult) -> pd.DataFrame:
    """
    Counts of people by number of distinct dates listed, split by outcome.
    Shows how the scarcest-first heuristic favours people who list more dates.
    """
    assigned = Counter(
        len(set(p.available_dates)) for p in res.schedule.assigned_people()
    )
    waitlisted = Counter(len(set(p.available_dates)) for p in res.schedule.waitlist)
    keys = sorted(set(assigned) | set(waitlisted))
    return pd.DataFrame(
        {
            "dates_listed": keys,
            "assigned": [assigned.get(k, 0) for k in keys],
            "waitlisted": [waitlisted.get(k, 0) for k in keys],
        },
        columns=["dates_listed", "assigned", "waitlisted"],
    )
