# signup_engine/generate/volunteers.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

import numpy as np
import pandas as pd

from signup_engine.dates import format_date_list
from signup_engine.volunteer import Person

FIRST_NAMES = (
    "Ava", "Ben", "Chloe", "Dev", "Ella", "Femi", "Grace", "Hugo", "Isla",
    "Jonah", "Kira", "Liam", "Maya", "Noah", "Olive", "Priya", "Quinn",
    "Rosa", "Sam", "Tara", "Umar", "Vera", "Wes", "Xin", "Yara", "Zane",
)  # fmt: skip
LAST_NAMES = (
    "Adams", "Brandon", "Chen", "Diaz", "Evans", "Fischer", "Garcia", "Hughes",
    "Ibrahim", "Jones", "Khan", "Lopez", "Morris", "Nguyen", "Okafor", "Patel",
)  # fmt: skip


# ----------------------------
# Configuration container
# ----------------------------
@dataclass(slots=True)
class SignupGenConfig:
    """
    Configuration for generation of synthetic signup rows.
    """

    n: int = 40

    # Weekly clinic dates starting here
    start_date: date = date(2016, 6, 1)
    num_dates: int = 8

    # How many distinct dates each person lists
    min_dates: int = 1
    max_dates: int = 3

    # Per-person probability of listing one of their dates twice
    duplicate_rate: float = 0.05

    # RNG seed
    seed: Optional[int] = 7

    def validate(self) -> None:
        if self.n <= 0:
            raise ValueError("n must be > 0.")
        if self.num_dates <= 0:
            raise ValueError("num_dates must be > 0.")
        if not (0 <= self.min_dates <= self.max_dates):
            raise ValueError("Require 0 <= min_dates <= max_dates.")
        if self.max_dates > self.num_dates:
            raise ValueError("max_dates cannot exceed num_dates.")
        if not (0.0 <= self.duplicate_rate <= 1.0):
            raise ValueError("duplicate_rate must be in [0,1].")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError("seed must be an int or None.")

    def clinic_dates(self) -> list[date]:
        return [self.start_date + timedelta(weeks=i) for i in range(self.num_dates)]


# ----------------------------
# Generation helpers
# ----------------------------
def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed) if seed is not None else np.random.default_rng()


def _popularity(num_dates: int, g: np.random.Generator) -> np.ndarray:
    """Uneven date popularity so some dates end up scarce."""
    weights = g.gamma(shape=1.5, scale=1.0, size=num_dates) + 0.05
    return weights / weights.sum()


def _unique_names(n: int, g: np.random.Generator) -> list[tuple[str, str]]:
    pairs = [(first, last) for first in FIRST_NAMES for last in LAST_NAMES]
    order = g.permutation(len(pairs))
    out: list[tuple[str, str]] = []
    for i in range(n):
        first, last = pairs[int(order[i % len(pairs)])]
        if i >= len(pairs):
            last = f"{last}{i // len(pairs) + 1}"
        out.append((first, last))
    return out


# ----------------------------
# Core API
# ----------------------------
def create_signups(cfg: SignupGenConfig) -> list[Person]:
    cfg.validate()
    g = _rng(cfg.seed)

    dates = cfg.clinic_dates()
    probs = _popularity(cfg.num_dates, g)

    people: list[Person] = []
    for first, last in _unique_names(cfg.n, g):
        k = int(g.integers(cfg.min_dates, cfg.max_dates + 1))
        idx = g.choice(cfg.num_dates, size=k, replace=False, p=probs) if k else []
        chosen = [dates[int(i)] for i in sorted(idx)]
        if chosen and g.random() < cfg.duplicate_rate:
            chosen.append(chosen[int(g.integers(len(chosen)))])
        people.append(
            Person(
                name=f"{first} {last}",
                email=f"{first.lower()}.{last.lower()}@example.edu",
                available_dates=chosen,
            )
        )
    return people


# ----------------------------
# Convenience utilities
# ----------------------------
def signup_summary(people: list[Person]) -> dict:
    n = len(people)
    per_date = Counter(d for p in people for d in p.available_dates)
    listed = [len(p.available_dates) for p in people]
    return {
        "N": n,
        "dates": len(per_date),
        "signups_per_date": dict(sorted(per_date.items())),
        "mean_dates_listed": float(np.mean(listed)) if listed else 0.0,
        "no_dates_pct": sum(1 for x in listed if x == 0) / n if n else 0.0,
    }


def signups_to_dataframe(people: list[Person]) -> pd.DataFrame:
    rows = [
        {
            "name": p.name,
            "email": p.email,
            "dates": ", ".join(
                f"{d.month}/{d.day}/{d.year % 100:02d}" for d in p.available_dates
            ),
            "dates_short": format_date_list(p.available_dates),
        }
        for p in people
    ]
    return pd.DataFrame(rows, columns=["name", "email", "dates", "dates_short"])
