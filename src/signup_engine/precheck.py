# signup_engine/precheck.py
from __future__ import annotations

import sys
from datetime import date
from typing import List, Tuple

from signup_engine.config import Config
from signup_engine.dates import format_date
from signup_engine.errors import DuplicateIdentity
from signup_engine.indexer import index_availability
from signup_engine.input_data import InputData
from signup_engine.pool import find_duplicate_identities


def _resolved_capacity(cfg: Config, data: InputData) -> int:
    cap = cfg.CAPACITY if cfg.CAPACITY is not None else data.capacity
    return int(cap or 0)


def precheck_signups(
    cfg: Config,
    data: InputData,
    *,
    verbose: bool = True,
    examples: int = 5,
    stream=None,
) -> Tuple[
    int,  # total_capacity
    int,  # people_count
    bool,  # ok_cap
    List[Tuple[date, int]],  # short_dates
    List[DuplicateIdentity],  # duplicates
]:
    """
    Returns:
      total_capacity: seats across every distinct date (capacity × #dates)
      people_count: number of signup rows
      ok_cap: total_capacity >= people_count (otherwise someone must be waitlisted)
      short_dates: (date, signups) where raw signups are below capacity,
                   in scarcity order
      duplicates: DuplicateIdentity records for emails used on more than one row
    Never mutates `data` and never raises for data-quality conditions.
    If `verbose` is True, prints a summary and one warning per duplicate email.
    """
    stream = stream or sys.stdout
    capacity = _resolved_capacity(cfg, data)

    slots = index_availability(data.people)
    total_capacity = capacity * len(slots)
    people_count = len(data.people)
    ok_cap = total_capacity >= people_count

    short_dates = [(s.date, s.signup_count) for s in slots if s.signup_count < capacity]
    duplicates = find_duplicate_identities(enumerate(data.people))

    if verbose:
        print("\nPre-check:", file=stream)
        print(
            f"  {people_count} signups across {len(slots)} dates | "
            f"capacity {capacity}/date -> {total_capacity} seats "
            f"({'enough' if ok_cap else 'short'} for everyone)",
            file=stream,
        )
        no_dates = sum(1 for p in data.people if not p.available_dates)
        if no_dates:
            print(f"  {no_dates} signup(s) list no dates at all", file=stream)
        if short_dates:
            preview = ", ".join(
                f"{format_date(d)} ({n})" for d, n in short_dates[:examples]
            )
            more = (
                f" … {len(short_dates) - examples} more"
                if len(short_dates) > examples
                else ""
            )
            print(f"  Dates below capacity: {preview}{more}", file=stream)
        for dup in duplicates:
            print(
                f"⚠️ Duplicate email {dup}: these rows are scheduled as separate "
                "people; check the form responses.",
                file=stream,
            )

    return total_capacity, people_count, ok_cap, short_dates, duplicates
