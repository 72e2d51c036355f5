from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable

from signup_engine.dates import same_date


def _normalize_date_list(values: Iterable[Any]) -> list[date]:
    out: list[date] = []
    for val in values:
        if isinstance(val, date) and not isinstance(val, datetime):
            out.append(val)
        elif isinstance(val, datetime):
            out.append(val.date())
        else:
            raise TypeError(
                "available_dates entries must be datetime.date or datetime.datetime."
            )
    return out


@dataclass(slots=True)
class Person:
    """
    A volunteer as read from one signup row.

    `email` is the identity key within a run. `available_dates` keeps the order
    the dates were listed in, including repeats.
    """

    name: str
    email: str
    available_dates: list[date] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"Person(name='{self.name}', email='{self.email}', "
            f"dates={[d.isoformat() for d in self.available_dates]})"
        )

    def __post_init__(self) -> None:
        self.available_dates = _normalize_date_list(self.available_dates)

    @property
    def label(self) -> str:
        """Display cell used in schedule and waitlist output."""
        return f"{self.name} {self.email}".strip()

    def is_available(self, day: date) -> bool:
        return any(same_date(d, day) for d in self.available_dates)
