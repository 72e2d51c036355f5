from __future__ import annotations

from datetime import date

import numpy as np
import pytest

from signup_engine.generate.volunteers import (
    SignupGenConfig,
    _popularity,
    create_signups,
    signup_summary,
    signups_to_dataframe,
)
from signup_engine.input_data import people_from_rows


def test_clinic_dates_are_weekly():
    cfg = SignupGenConfig(start_date=date(2016, 6, 1), num_dates=3)
    assert cfg.clinic_dates() == [date(2016, 6, 1), date(2016, 6, 8), date(2016, 6, 15)]


@pytest.mark.parametrize(
    "kwargs, msg",
    [
        ({"n": 0}, "n must be > 0"),
        ({"min_dates": 3, "max_dates": 2}, "min_dates <= max_dates"),
        ({"num_dates": 2, "max_dates": 3}, "max_dates cannot exceed"),
        ({"duplicate_rate": 1.5}, "duplicate_rate"),
    ],
)
def test_config_validation(kwargs, msg):
    with pytest.raises(ValueError, match=msg):
        SignupGenConfig(**kwargs).validate()


def test_popularity_is_a_distribution():
    probs = _popularity(6, np.random.default_rng(0))
    assert probs.shape == (6,)
    assert np.isclose(probs.sum(), 1.0)
    assert (probs > 0).all()


def test_create_signups_is_seeded_and_within_bounds():
    cfg = SignupGenConfig(n=30, num_dates=5, min_dates=1, max_dates=3, seed=21)
    people = create_signups(cfg)
    again = create_signups(SignupGenConfig(n=30, num_dates=5, max_dates=3, seed=21))

    assert [p.email for p in people] == [p.email for p in again]
    assert len({p.email for p in people}) == 30
    allowed = set(cfg.clinic_dates())
    for p in people:
        assert 1 <= len(set(p.available_dates)) <= 3
        assert set(p.available_dates) <= allowed
        assert p.email.endswith("@example.edu")


def test_duplicate_rate_one_repeats_a_date_for_everyone():
    people = create_signups(SignupGenConfig(n=10, duplicate_rate=1.0, seed=2))
    assert all(len(p.available_dates) == len(set(p.available_dates)) + 1 for p in people)


def test_summary_and_dataframe_round_trip_through_rows():
    people = create_signups(SignupGenConfig(n=8, seed=5))
    summary = signup_summary(people)
    assert summary["N"] == 8
    assert sum(summary["signups_per_date"].values()) == sum(
        len(p.available_dates) for p in people
    )

    df = signups_to_dataframe(people)
    assert df.columns.tolist() == ["name", "email", "dates", "dates_short"]
    reparsed = people_from_rows(df[["name", "email", "dates"]].itertuples(index=False))
    assert [p.available_dates for p in reparsed] == [p.available_dates for p in people]
