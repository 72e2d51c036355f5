# signup_engine/schedule.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from signup_engine.dates import format_date_list
from signup_engine.indexer import DateSlot, calendar_order
from signup_engine.volunteer import Person


@dataclass
class Schedule:
    """Allocation handed to the presentation layer."""

    capacity: int
    slots: list[DateSlot]  # calendar order
    waitlist: list[Person]
    scarcity_order: list[date] = field(default_factory=list)

    def assignment_rows(self) -> list[dict]:
        rows: list[dict] = []
        for slot in self.slots:
            for i, p in enumerate(slot.assigned_volunteers):
                rows.append(
                    {
                        "date": slot.date,
                        "position": i + 1,
                        "name": p.name,
                        "email": p.email,
                    }
                )
        return rows

    def waitlist_rows(self) -> list[dict]:
        return [
            {
                "name": p.name,
                "email": p.email,
                "dates_available": format_date_list(p.available_dates),
            }
            for p in self.waitlist
        ]

    def assigned_people(self) -> list[Person]:
        return [p for slot in self.slots for p in slot.assigned_volunteers]

    def seats_offered(self) -> int:
        return self.capacity * len(self.slots)


def assemble_schedule(
    slots: Sequence[DateSlot], waitlist: Sequence[Person], capacity: int
) -> Schedule:
    """
    Re-sort the slots chronologically and pair them with the waitlist.

    The incoming order (scarcity order) is kept on `scarcity_order` for
    diagnostics only.
    """
    return Schedule(
        capacity=capacity,
        slots=calendar_order(slots),
        waitlist=list(waitlist),
        scarcity_order=[s.date for s in slots],
    )
