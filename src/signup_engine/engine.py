# signup_engine/engine.py
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

from signup_engine.config import validate_capacity
from signup_engine.dates import format_date
from signup_engine.indexer import DateSlot
from signup_engine.pool import VolunteerPool
from signup_engine.volunteer import Person

T = TypeVar("T")


def random_prefix(items: Sequence[T], k: int, rng: random.Random) -> list[T]:
    """
    First `k` entries of a uniformly random permutation of `items`.

    Partial Fisher-Yates: only the first k positions are drawn, so the result
    is a uniformly random k-subset in uniformly random order.
    """
    work = list(items)
    n = len(work)
    k = min(k, n)
    for i in range(k):
        j = rng.randrange(i, n)
        work[i], work[j] = work[j], work[i]
    return work[:k]


def assign_volunteers(
    pool: VolunteerPool,
    slots: Sequence[DateSlot],
    capacity: int,
    rng: random.Random,
    inspect_emails: Optional[Sequence[str]] = None,
) -> None:
    """
    Fill each slot, scarcest first, with a random draw of up to `capacity`
    available pool members, moving the winners out of the pool.

    `slots` must already be in scarcity order (see `index_availability`).
    Capacity is checked before anything is touched.
    """
    validate_capacity(capacity)
    watched = {e.strip().lower() for e in (inspect_emails or [])}

    for slot in slots:
        candidates = pool.candidates_for(slot.date)
        if not candidates:
            continue

        chosen = random_prefix(candidates, capacity, rng)
        claimed = pool.claim(chosen)
        slot.assigned_volunteers.extend(claimed)

        if watched:
            _trace(slot, candidates, claimed, pool, watched)


def _trace(
    slot: DateSlot,
    candidates: list[int],
    claimed: list[Person],
    pool: VolunteerPool,
    watched: set[str],
) -> None:
    """Print per-person decisions for emails listed in Config.INSPECT_EMAILS."""
    claimed_emails = {p.email.strip().lower() for p in claimed}
    for p in claimed:
        if p.email.strip().lower() in watched:
            print(
                f"[inspect] {p.email}: assigned to {format_date(slot.date)} "
                f"({len(candidates)} candidates, {slot.signup_count} signups)"
            )
    for pos in candidates:
        if pos not in pool:
            continue
        email = pool.get(pos).email.strip().lower()
        if email in watched and email not in claimed_emails:
            print(
                f"[inspect] {pool.get(pos).email}: not drawn for "
                f"{format_date(slot.date)}; stays in pool"
            )
