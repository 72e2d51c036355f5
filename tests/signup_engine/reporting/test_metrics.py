from __future__ import annotations

from datetime import date

import pytest

from signup_engine.input_data import InputData
from signup_engine.model import SignupModel
from signup_engine.reporting import compute_allocation_metrics, compute_date_summary
from signup_engine.reporting.metrics import dates_listed_by_outcome
from signup_engine.volunteer import Person


def _result(cfg, people):
    model = SignupModel(cfg, InputData(people=people))
    model.build()
    return model.allocate()


def test_allocation_metrics_balance(make_cfg, mixed_people):
    m = compute_allocation_metrics(_result(make_cfg(capacity=1), mixed_people))
    assert m.people == 6
    assert m.assigned == 3
    assert m.waitlisted == 3
    assert m.dates == 3
    assert m.seats_offered == 3
    assert m.seats_filled == 3
    assert m.full_dates == 3
    assert m.empty_dates == 0
    assert m.fill_rate == pytest.approx(1.0)
    assert m.placement_rate == pytest.approx(0.5)
    assert m.duplicate_emails == 0


def test_metrics_count_empty_dates(make_cfg):
    june_1, june_3 = date(2016, 6, 1), date(2016, 6, 3)
    people = [Person("A", "a@x", [june_1, june_3]), Person("B", "b@x", [june_1, june_3])]
    m = compute_allocation_metrics(_result(make_cfg(capacity=2), people))
    assert m.empty_dates == 1
    assert m.seats_filled == 2
    assert m.fill_rate == pytest.approx(0.5)


def test_date_summary_adds_demand_ratio(make_cfg, mixed_people):
    df = compute_date_summary(_result(make_cfg(capacity=2), mixed_people))
    assert df["demand_ratio"].tolist() == pytest.approx([2.5, 1.5, 0.5])


def test_date_summary_empty(make_cfg):
    df = compute_date_summary(_result(make_cfg(), []))
    assert df.empty
    assert "demand_ratio" in df.columns


def test_dates_listed_by_outcome_counts_everyone(make_cfg, mixed_people):
    df = dates_listed_by_outcome(_result(make_cfg(capacity=1), mixed_people))
    assert df["dates_listed"].tolist() == [1, 2]
    assert int(df["assigned"].sum() + df["waitlisted"].sum()) == 6
