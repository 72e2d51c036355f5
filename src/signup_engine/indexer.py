# signup_engine/indexer.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from signup_engine.volunteer import Person


@dataclass
class DateSlot:
    """One clinic date. Only `assigned_volunteers` changes after indexing."""

    date: date
    signup_count: int = 0
    assigned_volunteers: list[Person] = field(default_factory=list)

    def filled(self) -> int:
        return len(self.assigned_volunteers)

    def open_seats(self, capacity: int) -> int:
        return max(capacity - self.filled(), 0)


def index_availability(people: Iterable[Person]) -> list[DateSlot]:
    """
    Tally availability per calendar date and return the slots in scarcity order.

    Every listed date counts, so a person naming the same date twice adds two
    signups to it. The sort is stable: dates with equal tallies keep the order
    in which they were first seen.
    """
    by_date: dict[date, DateSlot] = {}
    for person in people:
        for day in person.available_dates:
            slot = by_date.get(day)
            if slot is None:
                by_date[day] = DateSlot(date=day, signup_count=1)
            else:
                slot.signup_count += 1

    return sorted(by_date.values(), key=lambda s: s.signup_count)


def calendar_order(slots: Iterable[DateSlot]) -> list[DateSlot]:
    return sorted(slots, key=lambda s: s.date)
