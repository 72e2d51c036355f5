from __future__ import annotations

from datetime import date

import pytest

from signup_engine.pool import VolunteerPool, find_duplicate_identities
from signup_engine.volunteer import Person

D1, D2 = date(2016, 6, 1), date(2016, 6, 2)


def _pool() -> VolunteerPool:
    return VolunteerPool(
        [
            Person("A", "a@x", [D1, D1]),
            Person("B", "b@x", [D2]),
            Person("C", "c@x", [D1, D2]),
        ]
    )


def test_candidates_are_positions_in_pool_order_without_repeats() -> None:
    pool = _pool()
    assert pool.candidates_for(D1) == [0, 2]
    assert pool.candidates_for(D2) == [1, 2]
    assert pool.candidates_for(date(2016, 6, 3)) == []


def test_claim_moves_entries_out_in_given_order() -> None:
    pool = _pool()
    claimed = pool.claim([2, 0])
    assert [p.name for p in claimed] == ["C", "A"]
    assert len(pool) == 1
    assert 0 not in pool and 2 not in pool
    assert pool.candidates_for(D1) == []
    assert [p.name for p in pool.remaining()] == ["B"]


def test_claim_unknown_or_repeated_position_leaves_pool_untouched() -> None:
    pool = _pool()
    with pytest.raises(KeyError):
        pool.claim([0, 7])
    with pytest.raises(ValueError):
        pool.claim([1, 1])
    assert len(pool) == 3


def test_drain_empties_pool_in_order() -> None:
    pool = _pool()
    pool.claim([1])
    assert [p.name for p in pool.drain()] == ["A", "C"]
    assert len(pool) == 0
    assert pool.drain() == []


def test_duplicate_emails_are_found_case_insensitively() -> None:
    people = [
        Person("Ann", "Ann@X.edu", [D1]),
        Person("Bob", "bob@x.edu", [D1]),
        Person("Ann again", " ann@x.edu", [D2]),
    ]
    dups = find_duplicate_identities(enumerate(people))
    assert len(dups) == 1
    assert dups[0].email == "ann@x.edu"
    assert dups[0].positions == (1, 3)
    assert VolunteerPool(people).duplicate_identities() == dups
