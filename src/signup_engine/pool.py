# signup_engine/pool.py
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Iterator, Sequence

from signup_engine.errors import DuplicateIdentity
from signup_engine.volunteer import Person


class VolunteerPool:
    """
    Run-scoped arena of people who have not been placed yet.

    Members are keyed by their input position, so claiming moves exactly the
    selected entries out of the pool even when two rows share an email.
    Iteration follows input order minus whoever has been claimed.
    """

    def __init__(self, people: Iterable[Person]) -> None:
        self._members: dict[int, Person] = dict(enumerate(people))

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._members.values()))

    def __contains__(self, position: object) -> bool:
        return position in self._members

    def get(self, position: int) -> Person:
        return self._members[position]

    def candidates_for(self, day: date) -> list[int]:
        """Positions of members available on `day`, in pool order. Each member at most once."""
        return [pos for pos, p in self._members.items() if p.is_available(day)]

    def claim(self, positions: Sequence[int]) -> list[Person]:
        """Move the given members out of the pool and return them in the given order."""
        missing = [pos for pos in positions if pos not in self._members]
        if missing:
            raise KeyError(f"Positions not in pool: {missing}")
        if len(set(positions)) != len(positions):
            raise ValueError("Cannot claim the same position twice.")
        return [self._members.pop(pos) for pos in positions]

    def remaining(self) -> list[Person]:
        return list(self._members.values())

    def drain(self) -> list[Person]:
        """Hand over every remaining member, leaving the pool empty."""
        out = list(self._members.values())
        self._members.clear()
        return out

    def duplicate_identities(self) -> list[DuplicateIdentity]:
        return find_duplicate_identities(self._members.items())


def find_duplicate_identities(
    members: Iterable[tuple[int, Person]],
) -> list[DuplicateIdentity]:
    """Group 1-based row numbers by email and keep the emails used more than once."""
    by_email: dict[str, list[int]] = defaultdict(list)
    for pos, person in members:
        by_email[person.email.strip().lower()].append(pos + 1)
    return [
        DuplicateIdentity(email=email, positions=tuple(positions))
        for email, positions in by_email.items()
        if len(positions) > 1
    ]
