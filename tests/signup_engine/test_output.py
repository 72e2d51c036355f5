from __future__ import annotations

from datetime import date

import pandas as pd

from signup_engine.input_data import InputData
from signup_engine.model import SignupModel
from signup_engine.output import (
    ASSIGNMENTS_CSV,
    SCHEDULE_CSV,
    SIGNUPS_CHART,
    WAITLIST_CSV,
    produce_outputs,
    schedule_grid,
    waitlist_table,
)


def _result(cfg, people):
    model = SignupModel(cfg, InputData(people=people))
    model.build()
    return model.allocate()


def test_produce_outputs_writes_every_file(make_cfg, mixed_people):
    cfg = make_cfg(capacity=1)
    res = _result(cfg, mixed_people)
    out_dir = produce_outputs(res, cfg)

    for name in (SCHEDULE_CSV, ASSIGNMENTS_CSV, WAITLIST_CSV, SIGNUPS_CHART):
        assert (out_dir / name).exists()
    lines = (out_dir / SCHEDULE_CSV).read_text(encoding="utf-8").splitlines()
    assert lines[0] == cfg.SCHEDULE_TITLE
    assert lines[1] == "6/1/2016,6/2/2016,6/3/2016"

    waitlist = pd.read_csv(out_dir / WAITLIST_CSV)
    assert waitlist.columns.tolist() == ["Waitlist", "Dates Available"]
    assert len(waitlist) == 3


def test_produce_outputs_replaces_previous_files(make_cfg, mixed_people):
    cfg = make_cfg(capacity=2)
    cfg.OUTPUT_DIR.mkdir(parents=True)
    (cfg.OUTPUT_DIR / WAITLIST_CSV).write_text("stale\n")
    produce_outputs(_result(cfg, mixed_people), cfg)
    assert "stale" not in (cfg.OUTPUT_DIR / WAITLIST_CSV).read_text()


def test_schedule_grid_pads_shorter_columns(make_cfg, mixed_people):
    res = _result(make_cfg(capacity=2), mixed_people)
    grid = schedule_grid(res)
    assert grid.columns.tolist() == ["6/1/2016", "6/2/2016", "6/3/2016"]
    assert len(grid) == 2
    # 6/3 only has Cat
    assert grid["6/3/2016"].tolist() == ["Cat cat@example.edu", ""]


def test_waitlist_table_lists_short_dates(make_cfg):
    from signup_engine.volunteer import Person

    people = [
        Person("Ann", "ann@x", [date(2016, 6, 1), date(2016, 6, 8)]),
        Person("Bob", "bob@x", [date(2016, 6, 1)]),
        Person("Cat", "cat@x", [date(2016, 6, 1)]),
    ]
    res = _result(make_cfg(capacity=1), people)
    table = waitlist_table(res)
    assert len(table) == 1
    assert table.iloc[0]["Dates Available"] == "6/1"
    assert table.iloc[0]["Waitlist"] in {"Bob bob@x", "Cat cat@x"}


def test_no_chart_without_dates(make_cfg):
    from signup_engine.volunteer import Person

    cfg = make_cfg()
    out_dir = produce_outputs(_result(cfg, [Person("Ann", "ann@x", [])]), cfg)
    assert not (out_dir / SIGNUPS_CHART).exists()
    assert (out_dir / WAITLIST_CSV).exists()
