from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np

from signup_engine.dates import format_date, format_date_list
from signup_engine.result_types import AllocationResult

from .metrics import compute_allocation_metrics, compute_date_summary


class ReportDocument:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.lines: list[str] = []
        self.figures: list[plt.Figure] = []

    def add_text(self, text: str) -> None:
        self.lines.append(text)

    def add_figure(self, fig: plt.Figure) -> None:
        self.figures.append(fig)

    def write(self) -> None:
        from matplotlib.backends.backend_pdf import PdfPages

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with PdfPages(self.path) as pdf:
            if self.lines:
                fig, ax = plt.subplots(figsize=(8.27, 11.69))
                ax.axis("off")
                ax.text(
                    0.01,
                    0.99,
                    "\n".join(self.lines),
                    ha="left",
                    va="top",
                    fontsize=8,
                    family="monospace",
                )
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)
            for fig in self.figures:
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)


_ACTIVE_REPORT: Optional[ReportDocument] = None


def set_active_report(doc: Optional[ReportDocument]) -> None:
    global _ACTIVE_REPORT
    _ACTIVE_REPORT = doc


def get_active_report() -> Optional[ReportDocument]:
    return _ACTIVE_REPORT


def _log_print(*args, **kwargs) -> None:
    from io import StringIO

    buf = StringIO()
    kwargs_copy = kwargs.copy()
    kwargs_copy["file"] = buf
    print(*args, **kwargs_copy)
    print(*args, **kwargs)
    if _ACTIVE_REPORT is not None:
        _ACTIVE_REPORT.add_text(buf.getvalue().rstrip("\n"))


def _fmt_pct(x: float, nd: int = 1) -> str:
    return f"{100 * float(x):.{nd}f}%"


def render_text_report(
    cfg: Any,
    res: AllocationResult,
    *,
    num_print_examples: int = 6,
) -> None:
    m = compute_allocation_metrics(res)
    title = getattr(cfg, "SCHEDULE_TITLE", "Schedule")

    _log_print(title)
    _log_print(
        f"\nSummary: {m.assigned:,} assigned | {m.waitlisted:,} waitlisted "
        f"| {m.people:,} signups"
    )
    _log_print(
        f"Seats: {m.seats_filled:,} filled / {m.seats_offered:,} offered "
        f"({_fmt_pct(m.fill_rate)}) across {m.dates} dates at capacity {m.capacity}"
    )
    _log_print(f"Placement rate: {_fmt_pct(m.placement_rate)}")
    if res.seed is not None:
        _log_print(f"Random seed: {res.seed}")

    if m.empty_dates:
        _log_print(f"⚠️ {m.empty_dates} date(s) have nobody assigned.")

    df = compute_date_summary(res)
    if df.empty:
        _log_print("\nPer-date summary: (no dates listed)")
    else:
        shown = df.assign(date=[format_date(d) for d in df["date"]]).rename(
            columns={"scarcity_rank": "order"}
        )
        _log_print("\nPer-date summary (calendar order; 'order' = allocation order):")
        _log_print(shown.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

        ratios = df["demand_ratio"].to_numpy(dtype=float)
        _log_print(
            "\nDemand per seat: "
            f"mean={np.mean(ratios):.2f} | min={np.min(ratios):.2f} | "
            f"max={np.max(ratios):.2f}"
        )

    waitlist = res.schedule.waitlist
    if waitlist:
        _log_print(f"\nWaitlist (first {min(num_print_examples, len(waitlist))}):")
        for p in waitlist[:num_print_examples]:
            _log_print(f"  {p.label:<40} {format_date_list(p.available_dates)}")
        if len(waitlist) > num_print_examples:
            _log_print(f"  … {len(waitlist) - num_print_examples} more")
    else:
        _log_print("\nWaitlist: empty, everyone was placed.")

    if res.duplicates:
        _log_print("\n⚠️ Duplicate emails (scheduled as separate people):")
        for dup in res.duplicates:
            _log_print(f"    • {dup}")
