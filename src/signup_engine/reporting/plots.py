from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt

from signup_engine.output import signups_by_date_plot
from signup_engine.result_types import AllocationResult

from .metrics import dates_listed_by_outcome
from .text_report import get_active_report


def _save_and_show(fig: plt.Figure, out_dir: Path, filename: str, show: bool) -> None:
    """Persist the plot under the output dir and optionally show it."""
    out_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    if show:
        plt.show()
    report = get_active_report()
    if report is not None:
        report.add_figure(fig)
    else:
        plt.close(fig)


def show_signups_by_date(
    cfg: Any, res: AllocationResult, enable_plot: bool = True, show: bool = False
) -> None:
    if not enable_plot or res.df_slots.empty:
        return
    fig = signups_by_date_plot(res, title=getattr(cfg, "SCHEDULE_TITLE", None))
    _save_and_show(fig, Path(cfg.OUTPUT_DIR), "report_signups_by_date.png", show)


def show_outcome_by_dates_listed(
    cfg: Any, res: AllocationResult, enable_plot: bool = True, show: bool = False
) -> None:
    """Stacked bars of assigned/waitlisted people by number of distinct dates listed."""
    if not enable_plot:
        return
    df = dates_listed_by_outcome(res)
    if df.empty:
        return

    fig, ax = plt.subplots(figsize=(6.5, 4), dpi=150)
    ax.set_title("Outcome by number of dates listed", pad=30)
    x = df["dates_listed"].tolist()
    ax.bar(x, df["assigned"], label="Assigned", color="#CCCCFF", width=0.8)
    ax.bar(
        x,
        df["waitlisted"],
        bottom=df["assigned"],
        label="Waitlisted",
        color="#00DC00",
        alpha=0.7,
        width=0.8,
    )
    ax.set_xticks(x)
    ax.set_xlabel("Distinct dates listed")
    ax.set_ylabel("People")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, 1.12), ncol=2, frameon=False)
    fig.tight_layout()
    _save_and_show(fig, Path(cfg.OUTPUT_DIR), "outcome_by_dates_listed.png", show)
