# signup_engine/result_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from signup_engine.errors import DuplicateIdentity
from signup_engine.schedule import Schedule


@dataclass
class AllocationResult:
    """Structured output of an allocation run."""

    schedule: Schedule
    df_assignments: pd.DataFrame
    df_waitlist: pd.DataFrame
    df_slots: pd.DataFrame
    duplicates: list[DuplicateIdentity] = field(default_factory=list)
    seed: Optional[int] = None
