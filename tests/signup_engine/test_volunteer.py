from __future__ import annotations

from datetime import date, datetime

import pytest

from signup_engine.volunteer import Person


def test_person_normalizes_datetimes_and_keeps_order() -> None:
    p = Person(
        name="Dates",
        email="dates@example.edu",
        available_dates=[datetime(2016, 6, 2, 9, 0), date(2016, 6, 1), date(2016, 6, 2)],
    )
    assert p.available_dates == [date(2016, 6, 2), date(2016, 6, 1), date(2016, 6, 2)]


def test_person_rejects_non_dates() -> None:
    with pytest.raises(TypeError):
        Person(name="Bad", email="bad@example.edu", available_dates=["6/1/16"])  # type: ignore[list-item]


def test_is_available_and_label() -> None:
    p = Person("Ann Lee", "ann@example.edu", [date(2016, 6, 1)])
    assert p.is_available(date(2016, 6, 1))
    assert p.is_available(datetime(2016, 6, 1, 17, 0))
    assert not p.is_available(date(2016, 6, 2))
    assert p.label == "Ann Lee ann@example.edu"
