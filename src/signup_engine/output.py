from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from signup_engine.config import Config
from signup_engine.dates import format_date_list
from signup_engine.result_types import AllocationResult

SCHEDULE_CSV = "schedule.csv"
ASSIGNMENTS_CSV = "assignments.csv"
WAITLIST_CSV = "waitlist.csv"
SIGNUPS_CHART = "signups_by_date.png"


def produce_outputs(res: AllocationResult, cfg: Config, show: bool = False) -> Path:
    """Replace the schedule grid, assignment and waitlist CSVs plus the per-date chart."""
    out_dir = Path(cfg.OUTPUT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    for name in (SCHEDULE_CSV, ASSIGNMENTS_CSV, WAITLIST_CSV, SIGNUPS_CHART):
        (out_dir / name).unlink(missing_ok=True)

    with open(out_dir / SCHEDULE_CSV, "w", newline="", encoding="utf-8") as fh:
        fh.write(f"{cfg.SCHEDULE_TITLE}\n")
        schedule_grid(res).to_csv(fh, index=False)
    res.df_assignments.to_csv(out_dir / ASSIGNMENTS_CSV, index=False)
    waitlist_table(res).to_csv(out_dir / WAITLIST_CSV, index=False)

    if not res.df_slots.empty:
        fig = signups_by_date_plot(res)
        fig.savefig(out_dir / SIGNUPS_CHART, dpi=fig.dpi, bbox_inches="tight")
        if show:
            plt.show()
        plt.close(fig)

    print(f"\nOutputs written to {out_dir.resolve()}")
    return out_dir


def schedule_grid(res: AllocationResult) -> pd.DataFrame:
    """
    One column per clinic date in calendar order, volunteers listed beneath as
    "<name> <email>". Shorter columns are padded with blanks.
    """
    slots = res.schedule.slots
    if not slots:
        return pd.DataFrame()
    columns = {
        f"{s.date.month}/{s.date.day}/{s.date.year}": [
            p.label for p in s.assigned_volunteers
        ]
        for s in slots
    }
    height = max((len(v) for v in columns.values()), default=0)
    padded = {k: v + [""] * (height - len(v)) for k, v in columns.items()}
    return pd.DataFrame(padded)


def waitlist_table(res: AllocationResult) -> pd.DataFrame:
    rows = [
        {"Waitlist": p.label, "Dates Available": format_date_list(p.available_dates)}
        for p in res.schedule.waitlist
    ]
    return pd.DataFrame(rows, columns=["Waitlist", "Dates Available"])


def signups_by_date_plot(res: AllocationResult, title: str | None = None) -> plt.Figure:
    """Grouped bars: raw signups vs assigned per date, with the capacity line."""
    df = res.df_slots
    labels = [f"{d.month}/{d.day}" for d in df["date"]]
    x = list(range(len(labels)))
    width = 0.4

    fig, ax = plt.subplots(figsize=(max(6.0, 0.6 * len(labels) + 2), 4), dpi=150)
    ax.bar(
        [i - width / 2 for i in x],
        df["signups"],
        width=width,
        label="Signups",
        color="#FF8200",
        alpha=0.85,
    )
    ax.bar(
        [i + width / 2 for i in x],
        df["assigned"],
        width=width,
        label="Assigned",
        color="#CCCCFF",
        edgecolor="#6366F1",
        linewidth=0.6,
    )
    ax.axhline(
        res.schedule.capacity,
        color="0.4",
        linestyle="--",
        linewidth=0.9,
        label=f"Capacity ({res.schedule.capacity})",
    )
    ax.set_xticks(x, labels)
    ax.set_xlabel("Clinic date")
    ax.set_ylabel("People")
    ax.set_title(title or "Signups and assignments by date", pad=30)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    ax.legend(
        loc="upper center", bbox_to_anchor=(0.5, 1.12), ncol=3, frameon=False
    )
    fig.tight_layout()
    return fig
