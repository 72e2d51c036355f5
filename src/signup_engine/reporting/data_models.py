from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AllocationMetrics:
    """Headline numbers for one allocation run."""

    people: int
    assigned: int
    waitlisted: int
    dates: int
    capacity: int
    seats_offered: int  # capacity × dates
    seats_filled: int
    empty_dates: int  # dates nobody could be assigned to
    full_dates: int  # dates filled to capacity
    fill_rate: float  # seats_filled / seats_offered
    placement_rate: float  # assigned / people
    duplicate_emails: int
