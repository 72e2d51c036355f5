# signup_engine/model.py
from __future__ import annotations

import random
from typing import Optional

from signup_engine.config import Config, validate_capacity
from signup_engine.engine import assign_volunteers
from signup_engine.extract import extract_assignments, extract_slots, extract_waitlist
from signup_engine.indexer import DateSlot, index_availability
from signup_engine.input_data import InputData
from signup_engine.pool import VolunteerPool
from signup_engine.precheck import precheck_signups
from signup_engine.result_types import AllocationResult
from signup_engine.schedule import assemble_schedule
from signup_engine.waitlist import compile_waitlist


class SignupModel:
    """
    Thin orchestrator around:
      - precheck_signups()    -> capacity vs demand, duplicate emails
      - index_availability()  -> DateSlots in scarcity order
      - assign_volunteers()   -> random draw per slot, scarcest first
      - compile_waitlist() / assemble_schedule() -> Schedule
      - extraction helpers    -> pandas DataFrames
    """

    def __init__(
        self,
        cfg: Config,
        data: InputData,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.data = data
        self.rng = rng if rng is not None else random.Random(cfg.SEED)
        self._slots: list[DateSlot] | None = None  # populated by build()
        self._capacity: int | None = None

    # ---------- Precheck ----------
    def precheck(self):
        return precheck_signups(self.cfg, self.data)

    # ---------- Build ----------
    def build(self) -> list[DateSlot]:
        """
        Validate capacity and index availability into scarcity-ordered slots.
        Nothing is built when capacity is invalid.
        """
        capacity = self.cfg.CAPACITY
        if capacity is None:
            capacity = self.data.capacity
        self._capacity = validate_capacity(capacity)
        self._slots = index_availability(self.data.people)
        return self._slots

    # ---------- Allocate ----------
    def allocate(self) -> AllocationResult:
        """
        Run the assignment engine over a fresh pool and package the result.

        The pool lives only for the duration of this call. Each person ends
        up in exactly one slot or on the waitlist. Consumes the slots from
        build().

        Returns:
        AllocationResult: the Schedule plus DataFrames for output/reporting
        """
        if self._slots is None or self._capacity is None:
            raise RuntimeError("Call build() before allocate().")

        print("\nAllocating...")
        pool = VolunteerPool(self.data.people)
        duplicates = pool.duplicate_identities()
        for dup in duplicates:
            print(f"⚠️ Duplicate email {dup}: scheduled as separate people.")

        assign_volunteers(
            pool,
            self._slots,
            self._capacity,
            self.rng,
            inspect_emails=self.cfg.INSPECT_EMAILS,
        )
        waitlist = compile_waitlist(pool)
        schedule = assemble_schedule(self._slots, waitlist, self._capacity)
        # slots now belong to the schedule; a second run needs a fresh build()
        self._slots = None

        return AllocationResult(
            schedule=schedule,
            df_assignments=extract_assignments(schedule),
            df_waitlist=extract_waitlist(schedule),
            df_slots=extract_slots(schedule),
            duplicates=duplicates,
            seed=self.cfg.SEED,
        )
