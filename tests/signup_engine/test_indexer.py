from __future__ import annotations

from datetime import date

from signup_engine.indexer import DateSlot, calendar_order, index_availability
from signup_engine.volunteer import Person

D1, D2, D3, D4 = (date(2016, 6, d) for d in (1, 2, 3, 4))


def test_index_counts_every_listing_and_sorts_by_scarcity() -> None:
    people = [
        Person("A", "a@x", [D2, D1]),
        Person("B", "b@x", [D2]),
        Person("C", "c@x", [D3, D2]),
    ]
    slots = index_availability(people)
    assert [(s.date, s.signup_count) for s in slots] == [(D1, 1), (D3, 1), (D2, 3)]
    assert all(s.assigned_volunteers == [] for s in slots)


def test_duplicate_listing_by_one_person_counts_twice() -> None:
    people = [
        Person("A", "a@x", [D1, D1]),
        Person("B", "b@x", [D2]),
        Person("C", "c@x", [D2]),
        Person("D", "d@x", [D3]),
    ]
    slots = index_availability(people)
    counts = {s.date: s.signup_count for s in slots}
    assert counts == {D1: 2, D2: 2, D3: 1}
    # ties keep first-seen order: D1 before D2
    assert [s.date for s in slots] == [D3, D1, D2]


def test_scarcity_order_is_ascending_in_signup_count(mixed_people) -> None:
    slots = index_availability(mixed_people)
    counts = [s.signup_count for s in slots]
    assert counts == sorted(counts)
    assert slots[0].date == date(2016, 6, 3)


def test_empty_input_gives_no_slots() -> None:
    assert index_availability([]) == []
    assert index_availability([Person("A", "a@x", [])]) == []


def test_calendar_order_differs_from_scarcity_order() -> None:
    slots = [DateSlot(D4, 1), DateSlot(D2, 2), DateSlot(D3, 5), DateSlot(D1, 9)]
    assert [s.date for s in calendar_order(slots)] == [D1, D2, D3, D4]
    # input list untouched
    assert [s.date for s in slots] == [D4, D2, D3, D1]


def test_slot_filled_and_open_seats() -> None:
    slot = DateSlot(D1, 3, [Person("A", "a@x", [D1])])
    assert slot.filled() == 1
    assert slot.open_seats(3) == 2
    assert slot.open_seats(1) == 0
