from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from signup_engine.reporting.plots import (
    show_outcome_by_dates_listed,
    show_signups_by_date,
)
from signup_engine.reporting.text_report import (
    ReportDocument,
    render_text_report,
    set_active_report,
)
from signup_engine.result_types import AllocationResult


class Reporter:
    """High-level orchestrator: runs pre-check confirmations and renders reports."""

    def __init__(
        self,
        cfg: Any,
        num_print_examples: int = 6,
        enable_plots: bool = True,
        write_pdf: bool = True,
    ) -> None:
        """
        cfg must expose:
          - CAPACITY / OUTPUT_DIR / SCHEDULE_TITLE
        """
        self.cfg = cfg
        self.num_print_examples = num_print_examples
        self.enable_plots = enable_plots
        self.write_pdf = write_pdf

    def pre_solve(self, model: object) -> None:
        """
        Run the pre-check and ask before allocating when seats fall short of
        signups or the same email appears on more than one row.
        """
        precheck = getattr(model, "precheck", None)
        if not callable(precheck):
            print("Pre-check: (model has no `precheck()`; skipping)")
            return

        total_capacity, people_count, ok_cap, _short, duplicates = precheck()
        if ok_cap and not duplicates:
            return

        reasons = []
        if not ok_cap:
            reasons.append(
                f"{people_count - total_capacity} signup(s) will be waitlisted"
            )
        if duplicates:
            reasons.append(f"{len(duplicates)} duplicate email(s)")
        proceed = self._prompt_yes_no_default_yes(
            f"Pre-check: {'; '.join(reasons)}. Continue anyway?"
        )
        if not proceed:
            raise SystemExit("Stopped by user after pre-check.")

    def render_text_report(self, res: AllocationResult) -> None:
        """Public entry point for callers that want text reporting only."""
        render_text_report(
            self.cfg,
            res,
            num_print_examples=self.num_print_examples,
        )

    def post_solve(self, res: AllocationResult) -> None:
        """Render textual report (and optional plots) after allocating."""
        if not self.write_pdf:
            self.render_text_report(res)
            return

        report_doc = ReportDocument(Path(self.cfg.OUTPUT_DIR) / "report.pdf")
        set_active_report(report_doc)
        try:
            self.render_text_report(res)
            if not self.enable_plots:
                return
            show_signups_by_date(self.cfg, res, enable_plot=self.enable_plots)
            show_outcome_by_dates_listed(self.cfg, res, enable_plot=self.enable_plots)
        finally:
            set_active_report(None)
            report_doc.write()

    # ---------- helpers ----------

    def _prompt_yes_no_default_yes(self, msg: str) -> bool:
        """Prompt '[Y/n]' and return True for yes (default)."""
        try:
            if not sys.stdin or not sys.stdin.isatty():
                print(f"{msg} [Y/n] (non-interactive -> default: Y)")
                return True

            while True:
                resp = input(f"{msg} [Y/n]: ").strip().lower()
                if resp in ("", "y", "yes"):
                    return True
                if resp in ("n", "no"):
                    return False
                print("Please type 'y' or 'n'.")
        except (EOFError, KeyboardInterrupt):
            print("\nAborted by user.")
            return False
