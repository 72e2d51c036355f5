from __future__ import annotations

from signup_engine.pool import VolunteerPool
from signup_engine.volunteer import Person


def compile_waitlist(pool: VolunteerPool) -> list[Person]:
    """
    Drain whoever is left in the pool once every slot has been processed.

    People keep their full original availability and their pool order; no
    further sorting happens here.
    """
    return pool.drain()
